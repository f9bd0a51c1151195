"""Label and ownership handling for finalizing special resources and advancing states."""

from __future__ import annotations

import copy
from typing import Any, Iterable, Mapping

__all__ = [
    "FINALIZER",
    "PREAMBLE_NAME",
    "LABEL_DOMAIN",
    "STATE_LABEL_PREFIX",
    "READY",
    "strip_labels",
    "finalize_node_labels",
    "label_nodes_with_state",
    "namespace_owned_by_special_resource",
]

FINALIZER = "sro.openshift.io/finalizer"
PREAMBLE_NAME = "special-resource-preamble"
LABEL_DOMAIN = "specialresource.openshift.io"
STATE_LABEL_PREFIX = "specialresource.openshift.io/state-"
READY = "Ready"

_SRO_KIND = "SpecialResource"


def strip_labels(labels: Mapping[str, str] | None, remove: str) -> dict[str, str]:
    """A copy of the labels without those whose key contains ``remove``."""
    return {key: value for key, value in (labels or {}).items() if remove not in key}


def _with_labels(node: Mapping[str, Any], labels: dict[str, str]) -> dict[str, Any]:
    updated = copy.deepcopy(dict(node))
    metadata = dict(updated.get("metadata") or {})
    metadata["labels"] = labels
    updated["metadata"] = metadata
    return updated


def _labels(node: Mapping[str, Any]) -> Mapping[str, str]:
    metadata = node.get("metadata") or {}
    return metadata.get("labels") or {}


def finalize_node_labels(
    nodes: Iterable[Mapping[str, Any]], remove: str
) -> list[dict[str, Any]]:
    """Copies of the nodes with every label whose key contains ``remove`` dropped."""
    return [_with_labels(node, strip_labels(_labels(node), remove)) for node in nodes]


def label_nodes_with_state(
    nodes: Iterable[Mapping[str, Any]], state_name: str
) -> list[dict[str, Any]]:
    """Copies of the nodes labelled ``state_name=Ready``."""
    updated = []
    for node in nodes:
        labels = dict(_labels(node))
        labels[state_name] = READY
        updated.append(_with_labels(node, labels))
    return updated


def namespace_owned_by_special_resource(namespace: Mapping[str, Any]) -> bool:
    """True if any owner reference of the namespace is a SpecialResource."""
    metadata = namespace.get("metadata") or {}
    return any(
        isinstance(owner, Mapping) and owner.get("kind") == _SRO_KIND
        for owner in metadata.get("ownerReferences") or []
    )