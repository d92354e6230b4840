# note_views.py
from __future__ import annotations

import logging
from html import escape
from typing import TYPE_CHECKING, Optional

from event_observer import NoteEvent
from note import REMOVED_ID, Note
from note_list import NoteAdded, NoteList, NoteRemoved
from note_page import (
    FORM_WRAPPER,
    LIST_WRAPPER,
    MESSAGE,
    AddForm,
    HtmlPage,
    RenderPort,
    row_id,
)

if TYPE_CHECKING:
    from note_controller import NoteController

logger = logging.getLogger(__name__)


def layout(title: str, body_html: str) -> bytes:
    html = f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>{escape(title)}</title>
<meta name="viewport" content="width=device-width, initial-scale=1" />
<style>
  :root {{
    --danger:#b00020;
    --muted:#666;
    --b:#ddd;
  }}
  body {{ font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Arial; margin: 24px; }}
  .note {{ display:flex; gap:8px; align-items:center; border-bottom:1px solid var(--b); padding:6px 0; }}
  .note form {{ margin:0; }}
  button.link {{ border:none; background:none; color:var(--danger); cursor:pointer; padding:0; }}
  #message {{ color:var(--muted); margin:8px 0; min-height:1.2em; }}
  .muted {{ color:var(--muted); font-size: 90%; }}
</style>
</head>
<body>
{body_html}
</body>
</html>"""
    return html.encode("utf-8")


def _esc(x: object | None) -> str:
    return escape("" if x is None else str(x), quote=True)


# ===== фрагменты страницы =====

def form_html(form: Optional[AddForm]) -> str:
    if form is None:
        return ""
    return f"""
<form method="POST" action="{_esc(form.action)}">
  <input type="text" id="{_esc(form.textbox_id)}" name="{_esc(form.field_name)}" value="">
  <input type="submit" value="{_esc(form.submit_text)}">
</form>
"""


def note_row_html(note: Note) -> str:
    return (
        f"<div class='note' id='{_esc(row_id(note.id))}'>"
        f"<label>{_esc(note.content)}</label>"
        "<form method='POST' action='/note/remove'>"
        f"<input type='hidden' name='id' value='{_esc(note.id)}'>"
        "<button type='submit' class='link'>remove</button>"
        "</form>"
        "</div>"
    )


def page_view(page: HtmlPage) -> bytes:
    if page.placeholder is not None:
        list_html = _esc(page.placeholder)
    else:
        list_html = "".join(note_row_html(n) for n in page.rows.values())

    body = f"""
<h1>{_esc(page.title)}</h1>
<div id="{FORM_WRAPPER}">{form_html(page.form)}</div>
<div id="{MESSAGE}">{_esc(page.message)}</div>
<div id="{LIST_WRAPPER}">{list_html}</div>
"""
    return layout(page.title, body)


def not_found_view(msg: str = "Not Found") -> bytes:
    return layout("404", f"<h1>404</h1><p>{escape(msg)}</p>")


def bad_request_view(msg: str) -> bytes:
    return layout("400", f"<h1>400</h1><p class='muted'>{escape(msg)}</p>")


# ===== views =====

class NoteListView:
    """
    Список заметок на странице. Подписан на noteAdd/noteRemove и
    перерисовывает только изменившуюся строку; полная перерисовка,
    когда список был пуст или опустел.
    """

    def __init__(self, note_list: NoteList, controller: NoteController, page: RenderPort) -> None:
        self.note_list = note_list
        self.controller = controller
        self.page = page
        self.note_list.attach_observer(NoteEvent.ADD, self.update_after_adding)
        self.note_list.attach_observer(NoteEvent.REMOVE, self.update_after_removing)

    def display_list(self) -> None:
        self.page.render_list(self.note_list.get_list())

    def update_after_adding(self, payload: NoteAdded) -> None:
        note, message = payload
        if note.id is not None and note.id > REMOVED_ID:
            if len(self.note_list) < 2:
                # убираем заглушку пустого списка
                self.page.render_list(self.note_list.get_list())
            else:
                self.page.append_note(note)
        self.page.render_message(message)

    def update_after_removing(self, payload: NoteRemoved) -> None:
        note_id, message = payload
        if note_id > REMOVED_ID:
            self.page.remove_note_row(note_id)
        self.page.render_message(message)

        if len(self.note_list) < 1:
            self.page.render_list([])

    def handle_remove(self, note_id: int) -> None:
        """Клик по 'remove' у строки note-<id>."""
        note = self.note_list.get_note(note_id)
        if note is None:
            logger.info("remove requested for unknown note id=%s", note_id)
            note = Note(None)
        self.controller.handle_remove_event(note, self.note_list)


class NoteAddView:
    """Форма добавления заметки: поле ввода + кнопка 'add note'."""

    def __init__(self, note_list: NoteList, controller: NoteController, page: RenderPort) -> None:
        self.note_list = note_list
        self.controller = controller
        self.page = page
        self.form = AddForm()

    def display_form(self) -> None:
        self.page.render_form(self.form)

    def submit(self, content: Optional[str]) -> None:
        self.controller.handle_add_event(content, self.note_list)
