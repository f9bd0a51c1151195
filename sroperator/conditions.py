"""Cluster operator status conditions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

__all__ = [
    "DEGRADED_DEFAULT_MSG",
    "ConditionType",
    "ConditionStatus",
    "ClusterOperatorStatusCondition",
    "available_not_progressing_not_degraded",
    "not_available_progressing_not_degraded",
    "find_status_condition",
]

DEGRADED_DEFAULT_MSG = "Special Resource Operator reconciling special resources"


class ConditionType(str, Enum):
    """Kinds of cluster operator conditions."""

    AVAILABLE = "Available"
    PROGRESSING = "Progressing"
    DEGRADED = "Degraded"


class ConditionStatus(str, Enum):
    """Truth value of a condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ClusterOperatorStatusCondition:
    """One condition in a cluster operator's status."""

    type: ConditionType
    status: ConditionStatus
    reason: str = ""
    message: str = ""
    last_transition_time: datetime = field(default_factory=_now)


def available_not_progressing_not_degraded() -> list[ClusterOperatorStatusCondition]:
    """Conditions reported once all special resources are reconciled."""
    return [
        ClusterOperatorStatusCondition(
            ConditionType.AVAILABLE,
            ConditionStatus.TRUE,
            "AsExpected",
            "Reconciled all SpecialResources",
        ),
        ClusterOperatorStatusCondition(
            ConditionType.PROGRESSING,
            ConditionStatus.FALSE,
            "Reconciled",
            "SpecialResources up to date",
        ),
        ClusterOperatorStatusCondition(
            ConditionType.DEGRADED,
            ConditionStatus.FALSE,
            "AsExpected",
            DEGRADED_DEFAULT_MSG,
        ),
    ]


def not_available_progressing_not_degraded(
    msg_available: str, msg_progressing: str, msg_degraded: str
) -> list[ClusterOperatorStatusCondition]:
    """Conditions reported while a reconciliation is in progress."""
    return [
        ClusterOperatorStatusCondition(
            ConditionType.AVAILABLE, ConditionStatus.FALSE, "Reconciling", msg_available
        ),
        ClusterOperatorStatusCondition(
            ConditionType.PROGRESSING, ConditionStatus.TRUE, "Reconciling", msg_progressing
        ),
        ClusterOperatorStatusCondition(
            ConditionType.DEGRADED, ConditionStatus.FALSE, "Reconciled", msg_degraded
        ),
    ]


def find_status_condition(
    conditions: Iterable[ClusterOperatorStatusCondition], condition_type: ConditionType | str
) -> ClusterOperatorStatusCondition | None:
    """Return the first condition of the given type, or None."""
    return next((c for c in conditions if c.type == condition_type), None)