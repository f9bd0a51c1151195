from datetime import timedelta

from sroperator.leaderelection import ManagerOptions, apply_openshift_options


def _check_values(opts):
    assert opts.lease_duration == timedelta(seconds=137)
    assert opts.renew_deadline == timedelta(seconds=107)
    assert opts.retry_period == timedelta(seconds=26)


def test_opts_is_none():
    opts = apply_openshift_options(None)
    assert isinstance(opts, ManagerOptions)
    _check_values(opts)


def test_opts_has_other_values():
    opts = ManagerOptions(
        lease_duration=timedelta(seconds=1),
        renew_deadline=timedelta(seconds=2),
        retry_period=timedelta(seconds=3),
    )
    result = apply_openshift_options(opts)
    assert result is opts
    _check_values(result)


def test_sets_election_id_and_keeps_other_fields():
    opts = ManagerOptions(metrics_bind_address=":8080", port=9443, leader_election=True)
    result = apply_openshift_options(opts)
    assert result.leader_election_id == "b6ae617b.openshift.io"
    assert result.metrics_bind_address == ":8080"
    assert result.port == 9443
    assert result.leader_election is True