import pytest

from sroperator.cache import NodeCacheError, NodesCache, schedulable_nodes


def _node(name, *effects):
    node = {"metadata": {"name": name}}
    if effects:
        node["spec"] = {"taints": [{"key": "k", "effect": e} for e in effects]}
    return node


def test_untainted_nodes_are_kept():
    nodes = [_node("a"), _node("b")]
    assert schedulable_nodes(nodes) == nodes


@pytest.mark.parametrize("effect", ["NoSchedule", "NoExecute"])
def test_unschedulable_taints_are_dropped(effect):
    nodes = [_node("a"), _node("b", effect)]
    assert [n["metadata"]["name"] for n in schedulable_nodes(nodes)] == ["a"]


def test_prefer_no_schedule_is_kept():
    node = _node("a", "PreferNoSchedule")
    assert schedulable_nodes([node]) == [node]


def test_taint_without_effect_is_kept():
    node = {"metadata": {"name": "a"}, "spec": {"taints": [{"key": "k"}]}}
    assert schedulable_nodes([node]) == [node]


def test_mixed_taints_drop_node():
    assert schedulable_nodes([_node("a", "PreferNoSchedule", "NoExecute")]) == []


def test_bad_taints_raise():
    with pytest.raises(NodeCacheError):
        schedulable_nodes([{"spec": {"taints": "oops"}}])


def test_bad_taint_entry_raises():
    with pytest.raises(NodeCacheError):
        schedulable_nodes([{"spec": {"taints": ["oops"]}}])


def test_refresh_passes_selector_and_filters():
    calls = []

    def lister(selector):
        calls.append(selector)
        return [_node("a"), _node("b", "NoSchedule")]

    cache = NodesCache()
    assert cache.refresh(lister, {"role": "worker"}) is True
    assert calls == [{"role": "worker"}]
    assert [n["metadata"]["name"] for n in cache.items] == ["a"]


def test_refresh_without_labels_passes_none():
    calls = []
    cache = NodesCache()
    cache.refresh(lambda s: calls.append(s) or [], {})
    assert calls == [None]
    assert cache.items == []


def test_refresh_skipped_when_count_matches():
    cache = NodesCache(items=[_node("a")], count=1)
    calls = []
    assert cache.refresh(lambda s: calls.append(s) or []) is False
    assert calls == []
    assert len(cache.items) == 1


def test_refresh_forced_when_count_matches():
    cache = NodesCache(items=[_node("a")], count=1)
    assert cache.refresh(lambda s: [], force=True) is True
    assert cache.items == []


def test_lister_error_is_wrapped():
    def lister(selector):
        raise ConnectionError("down")

    cache = NodesCache()
    with pytest.raises(NodeCacheError, match="Client cannot get NodeList") as info:
        cache.refresh(lister)
    assert isinstance(info.value.__cause__, ConnectionError)