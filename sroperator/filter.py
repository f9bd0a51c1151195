"""Ownership labels and recognition of special resources and the objects they own."""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

__all__ = [
    "OWNED_LABEL",
    "FilterError",
    "set_label",
    "set_sub_resource_label",
    "is_special_resource",
    "owned",
]

log = logging.getLogger(__name__)

OWNED_LABEL = "specialresource.openshift.io/owned"

_SRO_KIND = "SpecialResource"
_SRO_API_MARKER = "sro.openshift.io/v"
_SRO_SELF_LINK_MARKER = "/apis/sro.openshift.io/v"
_SUB_RESOURCE_KINDS = frozenset({"DaemonSet", "Deployment", "StatefulSet"})
_TEMPLATE_LABELS_PATH = ("spec", "template", "metadata", "labels")


class FilterError(ValueError):
    """Raised when an object lacks the fields needed to label it."""


def _metadata(obj: Any) -> Mapping[str, Any]:
    if isinstance(obj, Mapping):
        metadata = obj.get("metadata")
    else:
        metadata = getattr(obj, "metadata", None)
    return metadata if isinstance(metadata, Mapping) else {}


def _kind(obj: Any) -> str:
    if isinstance(obj, Mapping):
        kind = obj.get("kind")
    else:
        kind = getattr(obj, "kind", None)
    return kind if isinstance(kind, str) else ""


def _name(obj: Any) -> str:
    return _metadata(obj).get("name") or ""


def set_label(obj: MutableMapping[str, Any]) -> None:
    """Mark the object, and the pod template of workloads, as owned by the operator."""
    metadata = obj.setdefault("metadata", {})
    labels = dict(metadata.get("labels") or {})
    labels[OWNED_LABEL] = "true"
    metadata["labels"] = labels
    set_sub_resource_label(obj)


def set_sub_resource_label(obj: MutableMapping[str, Any]) -> None:
    """Add the ownership label to the pod template of DaemonSets, Deployments and StatefulSets."""
    kind = _kind(obj)

    if kind in _SUB_RESOURCE_KINDS:
        parent: Any = obj
        *path, last = _TEMPLATE_LABELS_PATH
        for key in path:
            if not isinstance(parent, Mapping):
                raise FilterError(f"value at {key!r} is not an object")
            if key not in parent:
                raise FilterError("Labels not found")
            parent = parent[key]
        if not isinstance(parent, MutableMapping):
            raise FilterError("template metadata is not an object")
        if last not in parent:
            raise FilterError("Labels not found")
        labels = parent[last]
        if not isinstance(labels, Mapping):
            raise FilterError(".spec.template.metadata.labels is not an object")
        updated = dict(labels)
        updated[OWNED_LABEL] = "true"
        parent[last] = updated

    if kind == "BuildConfig":
        log.info("TODO: how to set label ownership for Builds and related Pods")


def owned(obj: Any) -> bool:
    """True if a SpecialResource owns the object or it carries the ownership label."""
    metadata = _metadata(obj)
    for owner in metadata.get("ownerReferences") or []:
        if isinstance(owner, Mapping) and owner.get("kind") == _SRO_KIND:
            log.info("Owned (sroGVK) %s", _name(obj))
            return True

    labels = metadata.get("labels")
    if isinstance(labels, Mapping) and OWNED_LABEL in labels:
        log.info("Owned (label) %s", _name(obj))
        return True
    return False


def is_special_resource(obj: Any) -> bool:
    """True if the object is a SpecialResource, also when it has no kind set yet."""
    kind = _kind(obj)
    if kind == _SRO_KIND:
        log.info("IsSpecialResource (sroGVK) %s", _name(obj))
        return True

    if _SRO_KIND in type(obj).__name__:
        log.info("IsSpecialResource (type) %s", _name(obj))
        return True

    # An object owned by the operator cannot itself be a special resource.
    if owned(obj):
        return False

    self_link = _metadata(obj).get("selfLink") or ""
    if isinstance(self_link, str) and _SRO_SELF_LINK_MARKER in self_link:
        log.info("IsSpecialResource (selflink) %s", _name(obj))
        return True

    if not kind and _SRO_API_MARKER in repr(obj):
        log.info("IsSpecialResource (contains) %s", _name(obj))
        return True

    return False