"""Cache of the cluster nodes that special resources are scheduled on."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

__all__ = ["NodeCacheError", "NodesCache", "schedulable_nodes", "node_cache"]

log = logging.getLogger(__name__)

_UNSCHEDULABLE = frozenset({"NoSchedule", "NoExecute"})
_UNSET_COUNT = 0xDEADBEEF

NodeLister = Callable[[Mapping[str, str] | None], Iterable[Mapping[str, Any]]]


class NodeCacheError(RuntimeError):
    """Raised when nodes cannot be listed or inspected."""


def _node_name(node: Mapping[str, Any]) -> str:
    metadata = node.get("metadata")
    if isinstance(metadata, Mapping):
        return metadata.get("name") or ""
    return ""


def _taints(node: Mapping[str, Any]) -> list[Any] | None:
    spec = node.get("spec")
    if spec is None:
        return None
    if not isinstance(spec, Mapping):
        raise NodeCacheError("Cannot extract taints from Node object: spec is not an object")
    if "taints" not in spec:
        return None
    taints = spec["taints"]
    if not isinstance(taints, list):
        raise NodeCacheError(
            f"Cannot extract taints from Node object: {type(taints).__name__} is not a list"
        )
    return taints


def _is_schedulable(node: Mapping[str, Any]) -> bool:
    taints = _taints(node)
    if taints is None:
        return True
    keep = True
    for taint in taints:
        if not isinstance(taint, Mapping):
            raise NodeCacheError("Cannot extract effect from taint object")
        effect = taint.get("effect")
        if effect is None:
            continue
        if not isinstance(effect, str):
            raise NodeCacheError("Cannot extract effect from taint object")
        if effect in _UNSCHEDULABLE:
            keep = False
    return keep


def schedulable_nodes(nodes: Iterable[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    """Nodes that carry no NoSchedule or NoExecute taint, in their original order."""
    kept = []
    for node in nodes:
        if _is_schedulable(node):
            log.info("Nodes cached: %s", _node_name(node))
            kept.append(node)
    return kept


@dataclass
class NodesCache:
    """The nodes currently selected for special resources."""

    items: list[Mapping[str, Any]] = field(default_factory=list)
    count: int = _UNSET_COUNT

    def refresh(
        self,
        list_nodes: NodeLister,
        matching_labels: Mapping[str, str] | None = None,
        force: bool = False,
    ) -> bool:
        """Reload the nodes through ``list_nodes``; return False if the cache was kept.

        ``list_nodes`` receives the label selector, or None when there is none.
        """
        if len(self.items) == self.count and not force:
            return False

        selector = dict(matching_labels) if matching_labels else None
        try:
            nodes = list(list_nodes(selector))
        except NodeCacheError:
            raise
        except Exception as err:
            raise NodeCacheError(f"Client cannot get NodeList: {err}") from err

        self.items = schedulable_nodes(nodes)

        log.info("Node list length: %d", len(self.items))
        if not self.items:
            log.info(
                "No nodes found for the SpecialResource. Consider setting "
                ".Spec.Node.Selector in the CR or labeling worker nodes."
            )
        return True


node_cache = NodesCache()