"""Tests for DiagnosticError and annotate."""
from __future__ import annotations

import pytest

from otelbuild.services.diagnostics.errors import DiagnosticError, annotate


def _make_error() -> DiagnosticError:
    return DiagnosticError("something broke")


@pytest.mark.parametrize("reason", ["compile failed", "", "multi\nline reason"])
def test_rendering_starts_with_reason(reason: str) -> None:
    err = DiagnosticError(reason)
    assert str(err).startswith(reason + "\n")
    assert str(err) == err.reason + "\n" + err.cause


def test_cause_is_captured_at_construction() -> None:
    err = _make_error()
    frames = [line.strip() for line in err.cause.splitlines() if line.lstrip().startswith("File ")]
    assert frames[-1].endswith("in _make_error")
    first = err.cause
    err.with_detail("k", "v")
    assert err.cause == first


def test_details_start_empty_and_are_not_rendered() -> None:
    err = DiagnosticError("boom")
    assert err.details == {}
    err.with_detail("stage", "link")
    assert "stage" not in str(err)


def test_with_detail_upserts_and_chains() -> None:
    err = DiagnosticError("boom")
    returned = err.with_detail("stage", "compile").with_detail("stage", "link")
    assert returned is err
    assert err.details == {"stage": "link"}


def test_reason_and_cause_are_read_only() -> None:
    err = DiagnosticError("boom")
    with pytest.raises(AttributeError):
        err.reason = "other"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        err.cause = "other"  # type: ignore[misc]


def test_annotate_mutates_diagnostic_error_in_place() -> None:
    err = DiagnosticError("boom")
    assert annotate(err, "package", "main") is err
    assert err.details == {"package": "main"}


def test_annotate_leaves_foreign_errors_untouched() -> None:
    err = ValueError("bad value")
    result = annotate(err, "package", "main")
    assert result is err
    assert result.args == ("bad value",)
    assert not hasattr(result, "details")


def test_diagnostic_error_is_raisable() -> None:
    with pytest.raises(DiagnosticError) as excinfo:
        raise DiagnosticError("link error").with_detail("stage", "link")
    assert excinfo.value.details["stage"] == "link"
