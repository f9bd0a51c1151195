"""Manager options and the cluster's leader election defaults."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

__all__ = ["ManagerOptions", "apply_openshift_options", "LEADER_ELECTION_ID"]

LEADER_ELECTION_ID = "b6ae617b.openshift.io"

_LEASE_DURATION = timedelta(seconds=137)
_RENEW_DEADLINE = timedelta(seconds=107)
_RETRY_PERIOD = timedelta(seconds=26)


@dataclass
class ManagerOptions:
    """Settings used to start the controller manager."""

    metrics_bind_address: str = ""
    port: int = 0
    leader_election: bool = False
    leader_election_id: str = ""
    lease_duration: timedelta | None = None
    renew_deadline: timedelta | None = None
    retry_period: timedelta | None = None


def apply_openshift_options(opts: ManagerOptions | None) -> ManagerOptions:
    """Set the leader election id and timings; create options if none are given."""
    if opts is None:
        opts = ManagerOptions()
    opts.leader_election_id = LEADER_ELECTION_ID
    opts.lease_duration = _LEASE_DURATION
    opts.retry_period = _RETRY_PERIOD
    opts.renew_deadline = _RENEW_DEADLINE
    return opts