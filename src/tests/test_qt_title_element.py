"""
Tests fuer den Qt-Adapter und die Plugin-Schale (ui.title).

Laufen mit QT_QPA_PLATFORM=offscreen, werden ohne PySide6 uebersprungen.
"""

import gc
import logging

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QFocusEvent, QInputMethodEvent, QKeyEvent
from PySide6.QtWidgets import QApplication, QLabel, QLineEdit, QVBoxLayout, QWidget
import shiboken6

from config.filename_rules import TITLE_OBJECT_NAME
from domain.filenames import InvalidReason, TitleNotFoundError, message_for_reason
from presenters.title import GuardState, TitleEditGuard
from ui.title import QtTitleElement, TitleGuardPlugin, attach_title_guard


def _make_view(text="Notiz", title_cls=QLineEdit):
    view = QWidget()
    layout = QVBoxLayout(view)
    title = title_cls(text)
    title.setObjectName(TITLE_OBJECT_NAME)
    layout.addWidget(title)
    return view, title


@pytest.fixture
def view(qapp):
    view, title = _make_view()
    yield view, title
    view.deleteLater()


def _focus_in(widget):
    QApplication.sendEvent(widget, QFocusEvent(QEvent.Type.FocusIn, Qt.FocusReason.OtherFocusReason))


def _focus_out(widget):
    QApplication.sendEvent(widget, QFocusEvent(QEvent.Type.FocusOut, Qt.FocusReason.OtherFocusReason))


def _press(widget, key):
    QApplication.sendEvent(widget, QKeyEvent(QEvent.Type.KeyPress, key, Qt.KeyboardModifier.NoModifier))


def _edit(widget, text):
    widget.setText(text)
    widget.textEdited.emit(text)


# ==============================================================================
# attach_title_guard
# ==============================================================================

def test_attach_finds_title(view):
    root, _ = view
    guard = attach_title_guard(root)
    assert guard.last_good_text == "Notiz"
    assert guard.listeners_active
    guard.destroy()


def test_attach_without_title_raises(qapp):
    empty = QWidget()
    with pytest.raises(TitleNotFoundError) as exc_info:
        attach_title_guard(empty)
    assert exc_info.value.found is None
    empty.deleteLater()


def test_attach_with_wrong_widget_type_raises(qapp):
    view, _ = _make_view(title_cls=QLabel)
    with pytest.raises(TitleNotFoundError) as exc_info:
        attach_title_guard(view)
    assert exc_info.value.found == "QLabel"
    view.deleteLater()


# ==============================================================================
# QtTitleElement: Event-Uebersetzung
# ==============================================================================

@pytest.fixture
def guarded(view):
    _, title = view
    element = QtTitleElement(title)
    guard = TitleEditGuard(element)
    edited, committed = [], []
    element.titleEdited.connect(edited.append)
    element.titleCommitted.connect(committed.append)
    yield title, element, guard, edited, committed
    guard.destroy()


def test_listeners_install_and_remove_event_filter(guarded):
    title, element, guard, _, _ = guarded
    assert element.listener_count() == 4
    guard.destroy()
    assert element.listener_count() == 0


def test_focus_in_starts_editing(guarded):
    title, _, guard, _, _ = guarded
    title.setText("Anders")
    _focus_in(title)
    assert guard.state is GuardState.EDITING
    assert guard.last_good_text == "Anders"


def test_invalid_edit_shows_error_and_is_not_forwarded(guarded):
    title, element, _, edited, _ = guarded
    _focus_in(title)

    _edit(title, "a:b")
    assert edited == []
    assert element.last_error == message_for_reason(InvalidReason.FORBIDDEN_CHARACTER)
    assert title.text() == "a:b"

    _edit(title, "ab")
    assert edited == ["ab"]


def test_invalid_enter_is_swallowed_and_text_restored(guarded):
    title, _, guard, _, committed = guarded
    _focus_in(title)
    _edit(title, "Notiz?")
    _press(title, Qt.Key.Key_Return)
    assert title.text() == "Notiz"
    assert committed == []
    assert guard.state is GuardState.EDITING


def test_valid_enter_commits(guarded):
    title, _, guard, _, committed = guarded
    _focus_in(title)
    _edit(title, "Protokoll")
    _press(title, Qt.Key.Key_Return)
    assert committed == ["Protokoll"]
    assert guard.last_good_text == "Protokoll"


def test_escape_is_not_intercepted(guarded):
    title, _, _, _, committed = guarded
    _focus_in(title)
    _edit(title, "a|b")
    _press(title, Qt.Key.Key_Escape)
    assert title.text() == "a|b"
    assert committed == []


def test_invalid_focus_out_restores(guarded):
    title, _, guard, _, committed = guarded
    _focus_in(title)
    _edit(title, "LPT1")
    _focus_out(title)
    assert title.text() == "Notiz"
    assert committed == []
    assert guard.state is GuardState.IDLE


class _EventRecorder(QObject):
    """Host-Filter, der vor dem Adapter installiert wird."""

    def __init__(self):
        super().__init__()
        self.seen = []

    def eventFilter(self, obj, event):
        self.seen.append(event.type())
        return False


def test_invalid_focus_out_still_reaches_host_filters(view):
    _, title = view
    recorder = _EventRecorder()
    title.installEventFilter(recorder)
    element = QtTitleElement(title)
    guard = TitleEditGuard(element)
    committed = []
    element.titleCommitted.connect(committed.append)

    _focus_in(title)
    _edit(title, "a<b")
    _press(title, Qt.Key.Key_Return)
    assert QEvent.Type.KeyPress not in recorder.seen

    _edit(title, "a<b")
    _focus_out(title)
    assert QEvent.Type.FocusOut in recorder.seen
    assert title.text() == "Notiz"
    assert committed == []
    assert guard.state is GuardState.IDLE

    guard.destroy()
    title.removeEventFilter(recorder)


def test_composition_input_is_ignored(guarded):
    title, element, _, edited, _ = guarded
    _focus_in(title)
    QApplication.sendEvent(title, QInputMethodEvent("ni", []))
    _edit(title, "日本:")
    assert element.last_error is None
    assert edited[-1] == "日本:"


def test_no_interception_after_destroy(guarded):
    title, element, guard, _, committed = guarded
    _focus_in(title)
    guard.destroy()
    _edit(title, "a*b")
    _press(title, Qt.Key.Key_Return)
    assert title.text() == "a*b"
    assert element.last_error is None


# ==============================================================================
# TitleGuardPlugin
# ==============================================================================

def test_plugin_attaches_once_per_view(view, tmp_path, clean_root_logger):
    root, _ = view
    plugin = TitleGuardPlugin(log_dir=str(tmp_path))
    plugin.on_load()

    guard = plugin.on_view_opened(root)
    assert plugin.on_view_opened(root) is guard
    assert plugin.guard_for(root) is guard

    plugin.on_view_closed(root)
    assert not guard.listeners_active
    assert plugin.guard_for(root) is None
    plugin.on_view_closed(root)


def test_plugin_reraises_attachment_error(qapp, tmp_path, clean_root_logger):
    plugin = TitleGuardPlugin(log_dir=str(tmp_path))
    plugin.on_load()
    empty = QWidget()
    with pytest.raises(TitleNotFoundError):
        plugin.on_view_opened(empty)
    assert plugin.guard_for(empty) is None
    empty.deleteLater()


def test_plugin_unload_destroys_all_guards(qapp, tmp_path, clean_root_logger):
    plugin = TitleGuardPlugin(log_dir=str(tmp_path))
    plugin.on_load()
    views = [_make_view(f"Dokument {i}") for i in range(3)]
    guards = [plugin.on_view_opened(v) for v, _ in views]
    plugin.on_file_renamed("Dokument 0.md")
    plugin.on_unload()
    assert all(not g.listeners_active for g in guards)
    for v, _ in views:
        v.deleteLater()


# ==============================================================================
# Geloeschte Widgets
# ==============================================================================

def test_deleted_title_widget_drops_listeners(qapp):
    root, title = _make_view()
    element = QtTitleElement(title)
    assert element.parent() is None
    guard = TitleEditGuard(element)

    shiboken6.delete(title)
    assert element.listener_count() == 0

    guard.destroy()
    guard.destroy()
    assert not guard.listeners_active
    root.deleteLater()


def test_plugin_teardown_after_title_was_deleted(qapp, tmp_path, clean_root_logger):
    plugin = TitleGuardPlugin(log_dir=str(tmp_path))
    plugin.on_load()
    root, title = _make_view()
    guard = plugin.on_view_opened(root)

    shiboken6.delete(title)
    plugin.on_view_closed(root)
    assert not guard.listeners_active
    plugin.on_unload()
    root.deleteLater()


def test_plugin_forgets_deleted_view(qapp, tmp_path, clean_root_logger):
    plugin = TitleGuardPlugin(log_dir=str(tmp_path))
    plugin.on_load()
    root, _ = _make_view()
    guard = plugin.on_view_opened(root)

    shiboken6.delete(root)
    assert not guard.listeners_active
    assert plugin.open_view_count() == 0
    plugin.on_unload()


def test_new_view_never_gets_guard_of_deleted_view(qapp, tmp_path, clean_root_logger):
    plugin = TitleGuardPlugin(log_dir=str(tmp_path))
    plugin.on_load()
    seen = []
    for i in range(20):
        root, _ = _make_view(f"Dokument {i}")
        guard = plugin.on_view_opened(root)
        assert all(guard is not old for old in seen)
        assert guard.listeners_active
        seen.append(guard)
        shiboken6.delete(root)
        del root
        gc.collect()
        assert not guard.listeners_active
    assert plugin.open_view_count() == 0
    plugin.on_unload()


def test_plugin_unload_continues_after_failing_guard(qapp, tmp_path, clean_root_logger,
                                                     monkeypatch, caplog):
    plugin = TitleGuardPlugin(log_dir=str(tmp_path))
    plugin.on_load()
    views = [_make_view(f"Dokument {i}") for i in range(3)]
    guards = [plugin.on_view_opened(v) for v, _ in views]

    def _broken_destroy():
        raise RuntimeError("Internal C++ object already deleted.")

    monkeypatch.setattr(guards[0], "destroy", _broken_destroy)
    with caplog.at_level(logging.ERROR):
        plugin.on_unload()

    assert not guards[1].listeners_active
    assert not guards[2].listeners_active
    assert plugin.open_view_count() == 0
    assert any("nicht entfernt" in r.getMessage() for r in caplog.records)
    for v, _ in views:
        v.deleteLater()
