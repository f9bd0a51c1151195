"""Cluster version, OS image and node operating system information."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, NamedTuple

__all__ = [
    "ClusterError",
    "ClusterVersion",
    "OperatingSystem",
    "version_from_history",
    "version_history",
    "os_image_url",
    "operating_system",
]

log = logging.getLogger(__name__)

_OS_RELEASE = "feature.node.kubernetes.io/system-os_release"
_COMPLETED = "Completed"


class ClusterError(RuntimeError):
    """Raised when cluster information is missing or malformed."""


class ClusterVersion(NamedTuple):
    version: str
    major_minor: str


class OperatingSystem(NamedTuple):
    major: str
    major_minor: str
    decimal: str


def _field(entry: Mapping[str, Any], key: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ClusterError(f"field {key!r} must be a string")
    return value


def version_from_history(history: Iterable[Mapping[str, Any]]) -> ClusterVersion:
    """The version of the first completed update, with its major.minor part."""
    for entry in history:
        if _field(entry, "state") != _COMPLETED:
            continue
        version = _field(entry, "version")
        parts = version.split(".")
        major_minor = ".".join(parts[:2]) if len(parts) > 1 else parts[0]
        return ClusterVersion(version, major_minor)
    raise ClusterError("Undefined Cluster Version")


def version_history(desired_image: str, history: Iterable[Mapping[str, Any]]) -> list[str]:
    """The desired release image followed by the images of all completed updates."""
    return [desired_image] + [
        _field(entry, "image") for entry in history if _field(entry, "state") == _COMPLETED
    ]


def os_image_url(config_map: Mapping[str, Any] | None) -> str:
    """The osImageURL held in the machine-config-osimageurl ConfigMap."""
    if config_map is None:
        raise ClusterError(
            "ConfigMap machine-config-osimageurl -n openshift-machine-config-operator not found"
        )
    data = config_map.get("data")
    if data is None:
        raise ClusterError("osImageURL not found")
    if not isinstance(data, Mapping):
        raise ClusterError("ConfigMap data is not an object")
    if "osImageURL" not in data:
        raise ClusterError("osImageURL not found")
    url = data["osImageURL"]
    if not isinstance(url, str):
        raise ClusterError("osImageURL is not a string")
    return url


def _labels(node: Mapping[str, Any]) -> Mapping[str, str]:
    metadata = node.get("metadata") or {}
    return metadata.get("labels") or {}


def operating_system(nodes: Iterable[Mapping[str, Any]]) -> OperatingSystem:
    """Operating system of the nodes, e.g. ('rhel8', 'rhel8.4', '8.4').

    All nodes are assumed to run the same OS; every node must carry the
    feature discovery release labels.
    """
    labels: Mapping[str, str] = {}
    for node in nodes:
        labels = _labels(node)
        if not labels.get(f"{_OS_RELEASE}.ID") or not labels.get(f"{_OS_RELEASE}.VERSION_ID.major"):
            raise ClusterError(f"Cannot extract {_OS_RELEASE}.*, is NFD running? Check node labels")

    rhel_version = labels.get(f"{_OS_RELEASE}.RHEL_VERSION")
    if rhel_version is not None and len(rhel_version) == 3:
        major, minor = rhel_version[0:1], rhel_version[2:]
        return OperatingSystem("rhel" + major, "rhel" + rhel_version, f"{major}.{minor}")

    release = labels.get(f"{_OS_RELEASE}.ID", "")
    major = labels.get(f"{_OS_RELEASE}.VERSION_ID.major", "")
    minor = labels.get(f"{_OS_RELEASE}.VERSION_ID.minor", "")
    raise ClusterError(
        f"Cannot determine operating system {release} {major}.{minor}: "
        f"label {_OS_RELEASE}.RHEL_VERSION missing or malformed"
    )