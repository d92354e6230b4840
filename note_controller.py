# note_controller.py
from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from note import Note
from note_list import NoteList
from note_page import RenderPort
from note_views import NoteAddView, NoteListView

logger = logging.getLogger(__name__)


class Notebook(NamedTuple):
    """Связка, которую собирает display_note_list()."""

    note_list: NoteList
    add_view: NoteAddView
    list_view: NoteListView


class NoteController:
    """
    Посредник между views и списком (MVC).
    Своего состояния нет: всё, что нужно, приходит аргументами.
    """

    def handle_add_event(self, content: Optional[str], note_list: NoteList) -> bool:
        """Отправка формы: новая заметка -> список (валидация внутри Note)."""
        return note_list.add_note(Note(content))

    def handle_remove_event(self, note: Note, note_list: NoteList) -> bool:
        return note_list.remove_note(note)

    def display_note_list(self, page: RenderPort, *, dummy_notes: int = 0) -> Notebook:
        """Пустой список + форма добавления + список заметок на странице."""
        note_list = NoteList()
        if dummy_notes > 0:
            note_list.add_dummy_notes(dummy_notes)

        add_view = NoteAddView(note_list, self, page)
        add_view.display_form()

        list_view = NoteListView(note_list, self, page)
        list_view.display_list()

        logger.info("note list displayed (%d notes)", len(note_list))
        return Notebook(note_list, add_view, list_view)
