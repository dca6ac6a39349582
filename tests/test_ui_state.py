from pathlib import Path

from northstar_mods.errors import RootNotFoundError
from northstar_mods.ui.state import TransientError, UiState


def test_report_error_sets_message_with_expiry():
    state = UiState(error_display_seconds=2.0)

    err = state.report_error(RootNotFoundError(Path("/x/mods"), "Directory not found"), now=100.0)

    assert err == TransientError("Directory not found: /x/mods", 102.0)
    assert state.error_text == "Directory not found: /x/mods"


def test_expire_error_clears_only_after_deadline():
    state = UiState(error_display_seconds=2.0)
    state.report_error("boom", now=10.0)

    assert state.expire_error(11.0) is False
    assert state.expire_error(12.0) is False
    assert state.error_text == "boom"

    assert state.expire_error(12.5) is True
    assert state.transient_error is None
    assert state.error_text == ""


def test_new_error_replaces_previous_one():
    state = UiState()
    state.report_error("first", now=0.0)

    state.report_error("second", now=1.0)

    assert state.transient_error == TransientError("second", 3.0)


def test_expire_without_error_is_noop():
    assert UiState().expire_error(1e9) is False
