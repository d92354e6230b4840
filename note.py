# note.py
from __future__ import annotations

import logging
from typing import Optional

from validators import Validator

logger = logging.getLogger(__name__)

# Идентификатор несохранённой (или удалённой) заметки
REMOVED_ID = -1


class Note:
    """
    Одна заметка: идентификатор + текст.

    id = None, пока заметку не сохраняли; -1 после неудачного сохранения
    или после удаления. Настоящего сервера нет, поэтому сохранение/удаление
    выполняются "заглушками" save_dummy/remove_dummy: идентификатор выдаёт
    список (автоинкремент).
    """

    def __init__(self, content: Optional[str]) -> None:
        self._id: Optional[int] = None
        self._content = content

    # ===== доступ =====
    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def content(self) -> Optional[str]:
        return self._content

    def _set_id(self, note_id: int) -> None:
        self._id = note_id

    # ===== валидация =====
    def is_valid(self) -> bool:
        try:
            Validator.note_content(self._content)
        except ValueError as e:
            logger.debug("note rejected: %s", e)
            return False
        return True

    # ===== жизненный цикл =====
    def save_dummy(self, candidate_id: int) -> bool:
        """Сохраняет заметку с выданным id. Пустой текст -> id = -1 и False."""
        if not self.is_valid():
            self._set_id(REMOVED_ID)
            return False
        self._set_id(candidate_id)
        return True

    def remove_dummy(self) -> bool:
        self._set_id(REMOVED_ID)
        return True

    def __str__(self) -> str:
        return f"id: {self._id}, content: {self._content}"

    def __repr__(self) -> str:
        return f"Note(id={self._id!r}, content={self._content!r})"
