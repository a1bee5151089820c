"""Tests for the session context."""

from uuid import uuid4

from macro_journal.domain.session import DEFAULT_TAB, SessionContext


def test_session_starts_without_user() -> None:
    session = SessionContext()

    assert not session.has_user
    assert session.active_tab == DEFAULT_TAB


def test_unknown_tab_falls_back_to_log() -> None:
    session = SessionContext(active_tab="settings")

    assert session.active_tab == "log"
    session.set_active_tab("recipes")
    assert session.active_tab == "recipes"
    session.set_active_tab(None)
    assert session.active_tab == "log"


def test_select_and_clear_user() -> None:
    user_id = uuid4()
    session = SessionContext()

    session.select_user(user_id)
    session.set_active_tab("summary")
    assert session.user_id == user_id
    assert session.has_user

    session.clear()
    assert session.user_id is None
    assert session.active_tab == "log"
