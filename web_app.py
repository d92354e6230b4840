# web_app.py
from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple
from wsgiref.simple_server import make_server

from note_controller import NoteController
from note_page import HtmlPage
from note_views import not_found_view
from settings import Settings, load_settings
from web_controller import NoteWebController

logger = logging.getLogger(__name__)


def application_factory(settings: Optional[Settings] = None) -> Tuple[Callable, NoteWebController]:
    settings = settings or Settings()

    page = HtmlPage()
    notebook = NoteController().display_note_list(page, dummy_notes=settings.dummy_notes)
    controller = NoteWebController(notebook, page)

    def app(environ, start_response):
        path = environ.get("PATH_INFO", "/")
        method = environ.get("REQUEST_METHOD", "GET").upper()

        if path in ("/", "/index"):
            return controller.index(environ, start_response)

        if path == "/note/add" and method == "POST":
            return controller.add(environ, start_response)
        if path == "/note/remove" and method == "POST":
            return controller.remove(environ, start_response)

        if path == "/debug/health":
            return controller.health(environ, start_response)

        logger.debug("404 %s %s", method, path)
        start_response("404 Not Found", [("Content-Type", "text/html; charset=utf-8")])
        return [not_found_view(f"{path} not found")]

    return app, controller


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app, _ = application_factory(settings)
    with make_server(settings.host, settings.port, app) as httpd:
        print(f"Notes app running at: http://{settings.host}:{settings.port}/")
        print("  /: notes; /debug/health: status and counter")
        httpd.serve_forever()


if __name__ == "__main__":
    main()
