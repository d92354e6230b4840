import pytest

from note_controller import NoteController
from note_page import EMPTY_LIST_TEXT, AddForm, HtmlPage
from note_views import page_view


class RecordingPage(HtmlPage):
    """HtmlPage, который запоминает вызовы порта рендеринга."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def render_list(self, notes):
        self.calls.append(("render_list", [n.id for n in notes]))
        super().render_list(notes)

    def append_note(self, note):
        self.calls.append(("append_note", note.id))
        super().append_note(note)

    def remove_note_row(self, note_id):
        self.calls.append(("remove_note_row", note_id))
        return super().remove_note_row(note_id)


@pytest.fixture
def page():
    return RecordingPage()


@pytest.fixture
def notebook(page):
    return NoteController().display_note_list(page)


def test_bootstrap_renders_form_and_empty_list(page, notebook):
    assert page.form == AddForm()
    assert page.placeholder == EMPTY_LIST_TEXT
    assert page.rows == {}
    assert len(notebook.note_list) == 0


def test_bootstrap_with_dummy_notes(page):
    notebook = NoteController().display_note_list(page, dummy_notes=3)
    assert len(notebook.note_list) == 3
    assert list(page.rows) == ["note-1", "note-2", "note-3"]
    assert page.placeholder is None


def test_first_add_redraws_whole_list(page, notebook):
    page.calls.clear()
    notebook.add_view.submit("Buy milk")

    assert page.calls == [("render_list", [1])]
    assert list(page.rows) == ["note-1"]
    assert page.message == "Buy milk is saved."


def test_next_add_appends_single_row(page, notebook):
    notebook.add_view.submit("first")
    page.calls.clear()
    notebook.add_view.submit("second")

    assert page.calls == [("append_note", 2)]
    assert list(page.rows) == ["note-1", "note-2"]


def test_failed_add_only_updates_message(page, notebook):
    page.calls.clear()
    notebook.add_view.submit("")

    assert page.calls == []
    assert page.placeholder == EMPTY_LIST_TEXT
    assert page.message == "note is not saved."


def test_remove_row_and_show_placeholder_when_empty(page, notebook):
    notebook.add_view.submit("Buy milk")
    page.calls.clear()

    notebook.list_view.handle_remove(1)

    assert page.calls == [("remove_note_row", 1), ("render_list", [])]
    assert page.message == "Buy milk is removed."
    assert page.placeholder == EMPTY_LIST_TEXT


def test_remove_keeps_other_rows(page, notebook):
    notebook.add_view.submit("a")
    notebook.add_view.submit("b")
    notebook.list_view.handle_remove(1)

    assert list(page.rows) == ["note-2"]
    assert page.placeholder is None


def test_remove_unknown_id_reports_not_found(page, notebook):
    notebook.add_view.submit("a")
    page.calls.clear()

    notebook.list_view.handle_remove(42)

    assert page.calls == []
    assert page.message == "note is not found."
    assert len(notebook.note_list) == 1


def test_controller_has_no_state():
    controller = NoteController()
    assert vars(controller) == {}


def test_page_view_escapes_content(page, notebook):
    notebook.add_view.submit("<script>alert(1)</script>")
    html = page_view(page).decode("utf-8")

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
    assert 'id="list_wrapper"' in html
    assert 'id="message"' in html
    assert 'id="new_note_wrapper"' in html
    assert "id='note-1'" in html


def test_page_view_shows_placeholder(page, notebook):
    html = page_view(page).decode("utf-8")
    assert "any notes yet. Try adding a new one." in html
    assert 'id="note_textbox"' in html
    assert 'value="add note"' in html


def test_remove_missing_row_returns_false():
    page = HtmlPage()
    assert page.remove_note_row(5) is False


def test_double_add_keeps_single_row(page, notebook):
    notebook.add_view.submit("Buy milk")
    note = notebook.note_list.get_note(1)

    notebook.note_list.add_note(note)
    assert list(page.rows) == ["note-1"]
    assert page.message == "note is not saved."

    notebook.list_view.handle_remove(1)
    assert page.rows == {}
    assert len(notebook.note_list) == 0
    assert page.placeholder == EMPTY_LIST_TEXT


class PortStub:
    """Порт рендеринга без HtmlPage: только журнал вызовов."""

    def __init__(self):
        self.calls = []

    def render_list(self, notes):
        self.calls.append(("render_list", [n.id for n in notes]))

    def append_note(self, note):
        self.calls.append(("append_note", note.id))

    def remove_note_row(self, note_id):
        self.calls.append(("remove_note_row", note_id))
        return True

    def render_message(self, text):
        self.calls.append(("render_message", text))

    def render_form(self, form):
        self.calls.append(("render_form", form))


def test_views_work_with_any_render_port():
    port = PortStub()
    notebook = NoteController().display_note_list(port)
    notebook.add_view.submit("a")
    notebook.add_view.submit("b")
    port.calls.clear()

    notebook.list_view.handle_remove(1)

    assert port.calls == [("remove_note_row", 1), ("render_message", "a is removed.")]
    assert [n.content for n in notebook.note_list] == ["b"]
