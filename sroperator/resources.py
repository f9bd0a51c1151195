"""Splitting charts into states and preparing the namespace and image puller binding."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, NamedTuple, Protocol

from sroperator.api import SpecialResource
from sroperator.assets import valid_state_name

__all__ = [
    "KERNEL_AFFINE_MARKER",
    "IMAGE_PULLER_SERVICE_ACCOUNT",
    "ResourceError",
    "ChartFile",
    "StateSplit",
    "split_state_templates",
    "is_kernel_affine",
    "namespace_manifest",
    "merge_image_puller_subject",
]

log = logging.getLogger(__name__)

KERNEL_AFFINE_MARKER = ".Values.kernelFullVersion"
IMAGE_PULLER_SERVICE_ACCOUNT = "builder"

_NAMESPACE_HEADER = """apiVersion: v1
kind: Namespace
metadata:
  annotations:
    specialresource.openshift.io/wait: "true"
    openshift.io/cluster-monitoring: "true"
  name: """


class ResourceError(ValueError):
    """Raised when a resource has fields of an unexpected shape."""


class _Named(Protocol):
    name: str


@dataclass(frozen=True)
class ChartFile:
    """A template file of a chart."""

    name: str
    data: bytes = b""


class StateSplit(NamedTuple):
    """Templates of a chart divided into numbered states and the rest."""

    states: list[Any]
    others: list[Any]


def split_state_templates(templates: Iterable[_Named]) -> StateSplit:
    """Separate state templates (e.g. 0000_driver.yaml), sorted by name, from the others.

    The other templates keep their original order.
    """
    states: list[Any] = []
    others: list[Any] = []
    for template in templates:
        (states if valid_state_name(template.name) else others).append(template)
    states.sort(key=lambda t: t.name)
    return StateSplit(states, others)


def is_kernel_affine(data: bytes | str) -> bool:
    """True if the template refers to the full kernel version and must be replicated per kernel."""
    text = data.decode("utf-8", errors="replace") if isinstance(data, (bytes, bytearray)) else data
    return KERNEL_AFFINE_MARKER in text


def namespace_manifest(special_resource: SpecialResource) -> str:
    """YAML of the namespace the special resource works in.

    A special resource without a namespace gets one named after itself; the
    object is updated accordingly.
    """
    if not special_resource.spec.namespace:
        special_resource.spec.namespace = special_resource.name
    return _NAMESPACE_HEADER + special_resource.spec.namespace


def merge_image_puller_subject(
    role_binding: Mapping[str, Any], namespace: str
) -> dict[str, Any] | None:
    """A copy of the image puller role binding with the builder account of ``namespace`` added.

    Returns None when a subject from that namespace is already bound.
    """
    subjects = role_binding.get("subjects")
    if subjects is None:
        subjects = []
    if not isinstance(subjects, list):
        raise ResourceError(f".subjects accessor error: {type(subjects).__name__} is not a list")

    for subject in subjects:
        if not isinstance(subject, Mapping):
            log.info("subject of unexpected type: %r", subject)
            continue
        subject_namespace = subject.get("namespace")
        if subject_namespace is not None and not isinstance(subject_namespace, str):
            raise ResourceError(
                f".namespace accessor error: {type(subject_namespace).__name__} is not a string"
            )
        if (subject_namespace or "") == namespace:
            log.info("ImageReference ServiceAccount found, returning")
            return None

    updated = copy.deepcopy(dict(role_binding))
    updated["subjects"] = copy.deepcopy(subjects) + [
        {
            "kind": "ServiceAccount",
            "name": IMAGE_PULLER_SERVICE_ACCOUNT,
            "namespace": namespace,
        }
    ]
    return updated