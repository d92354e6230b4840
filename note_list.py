# note_list.py
from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Iterator, NamedTuple, Optional

from event_observer import EventObserver, NoteEvent
from note import REMOVED_ID, Note

logger = logging.getLogger(__name__)


class NoteAdded(NamedTuple):
    """Payload события noteAdd. Неудача: note.id == -1."""

    note: Note
    message: str


class NoteRemoved(NamedTuple):
    """Payload события noteRemove. Неудача/не найдено: note_id == -1."""

    note_id: int
    message: str


class NoteList:
    """
    Список заметок пользователя (порядок добавления = порядок показа).

    Добавление/удаление проходят через dummy-сохранение заметки,
    результат рассылается подписчикам через EventObserver:
      - "noteAdd"    payload: NoteAdded(note, message)   (и успех, и неудача)
      - "noteRemove" payload: NoteRemoved(note_id, message)
    """

    def __init__(self) -> None:
        self._notes: list[Note] = []
        self._observer = EventObserver([NoteEvent.ADD, NoteEvent.REMOVE])
        # Автоинкремент вместо id с сервера
        self._auto_id = 1

    # ===== чтение =====
    def get_list(self) -> list[Note]:
        return list(self._notes)

    def get_note(self, note_id: int) -> Optional[Note]:
        for n in self._notes:
            if n.id == note_id:
                return n
        return None

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes))

    def _index_of(self, note: Note) -> int:
        for i, n in enumerate(self._notes):
            if n.id == note.id:
                return i
        return -1

    # ===== CRUD =====
    def add_note(self, note: Note) -> bool:
        if any(n is note for n in self._notes):
            # уже в списке: id не трогаем, второй раз не добавляем
            logger.debug("noteAdd: %s is already in the list", note)
            self._observer.notify(NoteEvent.ADD, NoteAdded(note, "note is not saved."))
            return False

        candidate_id = self._auto_id
        self._auto_id += 1  # id расходуется и при неудаче

        if note.save_dummy(candidate_id):
            self._notes.append(note)
            payload = NoteAdded(note, f"{note.content} is saved.")
            ok = True
        else:
            payload = NoteAdded(note, "note is not saved.")
            ok = False

        logger.debug("noteAdd: %s (ok=%s)", note, ok)
        self._observer.notify(NoteEvent.ADD, payload)
        return ok

    def remove_note(self, note: Note) -> bool:
        index = self._index_of(note)
        note_id = note.id
        ok = False

        if index > -1:
            if note.remove_dummy():
                del self._notes[index]
                payload = NoteRemoved(note_id, f"{note.content} is removed.")
                ok = True
            else:
                payload = NoteRemoved(REMOVED_ID, f"{note.content} is not removed, error!")
        else:
            payload = NoteRemoved(REMOVED_ID, "note is not found.")

        logger.debug("noteRemove: id=%s (ok=%s)", note_id, ok)
        self._observer.notify(NoteEvent.REMOVE, payload)
        return ok

    # ===== подписка =====
    def attach_observer(self, event: Hashable, listener: Callable[[Any], None]) -> None:
        self._observer.attach(event, listener)

    # ===== служебные =====
    def add_dummy_notes(self, limit: int) -> None:
        """Заполняет список тестовыми заметками 'dummy note-1'..'dummy note-N'."""
        for i in range(limit):
            self.add_note(Note(f"dummy note-{i + 1}"))

    def __str__(self) -> str:
        return "\n".join(f"Index: {i}, note: {n}" for i, n in enumerate(self._notes))
