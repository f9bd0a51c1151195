from datetime import datetime, timezone

import pytest

from sroperator.conditions import (
    ConditionStatus,
    ConditionType,
    available_not_progressing_not_degraded,
    find_status_condition,
    not_available_progressing_not_degraded,
)


def _find_and_compare(conditions, cond_type, status, reason, message):
    cond = find_status_condition(conditions, cond_type)
    assert cond is not None
    assert cond.status == status
    assert cond.reason == reason
    assert cond.message == message
    assert cond.last_transition_time > datetime(1970, 1, 2, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "cond_type, status, reason, message",
    [
        (ConditionType.AVAILABLE, ConditionStatus.TRUE, "AsExpected", "Reconciled all SpecialResources"),
        (ConditionType.PROGRESSING, ConditionStatus.FALSE, "Reconciled", "SpecialResources up to date"),
        (
            ConditionType.DEGRADED,
            ConditionStatus.FALSE,
            "AsExpected",
            "Special Resource Operator reconciling special resources",
        ),
    ],
)
def test_available_not_progressing_not_degraded(cond_type, status, reason, message):
    _find_and_compare(available_not_progressing_not_degraded(), cond_type, status, reason, message)


MSG_AVAILABLE = "some-msg-available"
MSG_PROGRESSING = "some-msg-progressing"
MSG_DEGRADED = "some-msg-degraded"


@pytest.mark.parametrize(
    "cond_type, status, reason, message",
    [
        (ConditionType.AVAILABLE, ConditionStatus.FALSE, "Reconciling", MSG_AVAILABLE),
        (ConditionType.PROGRESSING, ConditionStatus.TRUE, "Reconciling", MSG_PROGRESSING),
        (ConditionType.DEGRADED, ConditionStatus.FALSE, "Reconciled", MSG_DEGRADED),
    ],
)
def test_not_available_progressing_not_degraded(cond_type, status, reason, message):
    conds = not_available_progressing_not_degraded(MSG_AVAILABLE, MSG_PROGRESSING, MSG_DEGRADED)
    _find_and_compare(conds, cond_type, status, reason, message)


def test_find_status_condition_accepts_plain_string():
    cond = find_status_condition(available_not_progressing_not_degraded(), "Progressing")
    assert cond.type == ConditionType.PROGRESSING


def test_find_status_condition_missing_returns_none():
    assert find_status_condition([], ConditionType.DEGRADED) is None