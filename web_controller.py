# web_controller.py
from __future__ import annotations

import logging
from typing import Dict
from urllib.parse import parse_qs

from note_controller import Notebook
from note_page import HtmlPage
from note_views import bad_request_view, layout, page_view

logger = logging.getLogger(__name__)


class NoteWebController:
    """
    HTTP-обёртка над страницей заметок.
    GET  /             -> страница (форма, сообщение, список)
    POST /note/add     -> content=...; NoteAddView.submit, затем redirect на /
    POST /note/remove  -> id=...; NoteListView.handle_remove, затем redirect на /
    """

    def __init__(self, notebook: Notebook, page: HtmlPage) -> None:
        self.notebook = notebook
        self.page = page

    # --- helpers ---

    @staticmethod
    def _read_post(environ) -> Dict[str, str]:
        try:
            size = int(environ.get("CONTENT_LENGTH", "0") or 0)
        except ValueError:
            size = 0
        body = environ["wsgi.input"].read(size).decode("utf-8", errors="replace")
        parsed = parse_qs(body, keep_blank_values=True)
        return {k: (v[0] if v else "") for k, v in parsed.items()}

    @staticmethod
    def _redirect(start_response, location: str = "/") -> list[bytes]:
        start_response("302 Found", [("Location", location)])
        return [b""]

    # --- actions ---

    def index(self, environ, start_response) -> list[bytes]:
        start_response("200 OK", [("Content-Type", "text/html; charset=utf-8")])
        return [page_view(self.page)]

    def add(self, environ, start_response) -> list[bytes]:
        form = self._read_post(environ)
        # поля нет -> None, как "undefined" у пустой формы
        self.notebook.add_view.submit(form.get("content"))
        return self._redirect(start_response)

    def remove(self, environ, start_response) -> list[bytes]:
        form = self._read_post(environ)
        try:
            note_id = int(form.get("id", ""))
        except ValueError:
            start_response("400 Bad Request", [("Content-Type", "text/html; charset=utf-8")])
            return [bad_request_view("Invalid note id")]

        self.notebook.list_view.handle_remove(note_id)
        return self._redirect(start_response)

    def health(self, environ, start_response) -> list[bytes]:
        body = (
            "<h1>Health</h1>"
            f"<p>Notes: <b>{len(self.notebook.note_list)}</b></p>"
        )
        start_response("200 OK", [("Content-Type", "text/html; charset=utf-8")])
        return [layout("Health", body)]
