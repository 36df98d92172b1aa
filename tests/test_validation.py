from types import SimpleNamespace

import pytest

from app.common.errors import ValidationError
from app.features.attempts.models import ConfidenceLevel
from app.features.attempts.schemas import UpsertAttemptRequest
from app.features.attempts.validation import is_meaningful, parse_confidence, validate_payload
from app.features.dashboard.scope import DashboardScope


def test_empty_payload_is_rejected():
    payload = UpsertAttemptRequest(solved=None, date_solved=None, time_minutes=None, notes="")
    with pytest.raises(ValidationError):
        validate_payload(payload)


def test_blank_text_is_not_meaningful():
    assert not is_meaningful(UpsertAttemptRequest(notes="   ", problem_url=""))
    assert is_meaningful(UpsertAttemptRequest(problem_url="https://leetcode.com/problems/two-sum"))


def test_solved_false_is_meaningful():
    assert is_meaningful(SimpleNamespace(solved=False))


@pytest.mark.parametrize("body", [{"attempts": 0}, {"time_minutes": -1}, {"confidence": "SURE"}])
def test_out_of_range_values_rejected(body):
    with pytest.raises(ValidationError):
        validate_payload(UpsertAttemptRequest(solved=True, **body))


def test_confidence_is_case_insensitive():
    assert parse_confidence(" medium ") is ConfidenceLevel.MEDIUM
    assert parse_confidence("") is None


def test_camel_case_payload_accepted():
    payload = UpsertAttemptRequest.model_validate({"timeMinutes": 25, "dateSolved": "2026-03-10"})
    assert payload.time_minutes == 25
    validate_payload(payload)


def test_scope_parsing():
    assert DashboardScope.parse(None) is DashboardScope.LATEST
    assert DashboardScope.parse(" ALL ") is DashboardScope.ALL
    assert DashboardScope.parse("List") is DashboardScope.LIST
    with pytest.raises(ValidationError):
        DashboardScope.parse("everything")
