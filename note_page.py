# note_page.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from note import Note

logger = logging.getLogger(__name__)

# Фиксированные id областей страницы
LIST_WRAPPER = "list_wrapper"
MESSAGE = "message"
FORM_WRAPPER = "new_note_wrapper"

EMPTY_LIST_TEXT = "You don't have any notes yet. Try adding a new one."


def row_id(note_id: Optional[int]) -> str:
    return f"note-{note_id}"


@dataclass(frozen=True)
class AddForm:
    """Описание формы добавления (что рисовать в new_note_wrapper)."""

    action: str = "/note/add"
    textbox_id: str = "note_textbox"
    field_name: str = "content"
    submit_text: str = "add note"


class RenderPort(Protocol):
    """Три области страницы, которые views умеют перерисовывать."""

    def render_list(self, notes: Sequence[Note]) -> None: ...

    def append_note(self, note: Note) -> None: ...

    def remove_note_row(self, note_id: int) -> bool: ...

    def render_message(self, text: str) -> None: ...

    def render_form(self, form: AddForm) -> None: ...


class HtmlPage:
    """
    In-memory страница: состояние трёх областей.
    HTML из неё собирает note_views.page_view().
    """

    def __init__(self, title: str = "Notes") -> None:
        self.title = title
        self.placeholder: Optional[str] = None
        self.rows: dict[str, Note] = {}
        self.message = ""
        self.form: Optional[AddForm] = None

    # ===== list_wrapper =====
    def render_list(self, notes: Sequence[Note]) -> None:
        self.rows.clear()
        self.placeholder = None
        if not notes:
            self.placeholder = EMPTY_LIST_TEXT
            return
        for n in notes:
            self.rows[row_id(n.id)] = n

    def append_note(self, note: Note) -> None:
        self.placeholder = None
        self.rows[row_id(note.id)] = note

    def remove_note_row(self, note_id: int) -> bool:
        if self.rows.pop(row_id(note_id), None) is None:
            logger.warning("no row %s in %s", row_id(note_id), LIST_WRAPPER)
            return False
        return True

    # ===== message / new_note_wrapper =====
    def render_message(self, text: str) -> None:
        self.message = text

    def render_form(self, form: AddForm) -> None:
        self.form = form
