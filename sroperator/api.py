"""SpecialResource custom resource types of the sro.openshift.io/v1beta1 API."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping

from sroperator.helmer_types import HelmChart

__all__ = [
    "GROUP",
    "VERSION",
    "GROUP_VERSION",
    "KIND",
    "LIST_KIND",
    "SpecialResourceDependency",
    "SpecialResourceSpec",
    "SpecialResourceStatus",
    "SpecialResource",
]

GROUP = "sro.openshift.io"
VERSION = "v1beta1"
GROUP_VERSION = f"{GROUP}/{VERSION}"
KIND = "SpecialResource"
LIST_KIND = "SpecialResourceList"


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"field {key!r} must be a boolean, got {type(value).__name__}")
    return value


def _object(data: Mapping[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise TypeError(f"field {key!r} must be a mapping, got {type(value).__name__}")
    return copy.deepcopy(dict(value))


def _string_map(data: Mapping[str, Any], key: str) -> dict[str, str] | None:
    value = _object(data, key)
    if value is None:
        return None
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
        raise TypeError(f"field {key!r} must map strings to strings")
    return value


@dataclass
class SpecialResourceDependency:
    """A dependent chart and the values it is installed with."""

    chart: HelmChart = field(default_factory=HelmChart)
    values: dict[str, Any] | None = None

    @property
    def name(self) -> str:
        return self.chart.name

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SpecialResourceDependency:
        data = _mapping(data, "dependency")
        return cls(chart=HelmChart.from_dict(data.get("chart")), values=_object(data, "set"))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"chart": self.chart.to_dict()}
        if self.values:
            out["set"] = copy.deepcopy(self.values)
        return out


@dataclass
class SpecialResourceSpec:
    """Desired state of a special resource."""

    chart: HelmChart = field(default_factory=HelmChart)
    namespace: str = ""
    force_upgrade: bool = False
    debug: bool = False
    values: dict[str, Any] | None = None
    driver_container: dict[str, Any] = field(default_factory=dict)
    node_selector: dict[str, str] | None = None
    dependencies: list[SpecialResourceDependency] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SpecialResourceSpec:
        data = _mapping(data, "spec")
        raw_dependencies = data.get("dependencies") or []
        if not isinstance(raw_dependencies, list):
            raise TypeError("field 'dependencies' must be a list")
        return cls(
            chart=HelmChart.from_dict(data.get("chart")),
            namespace=_string(data, "namespace"),
            force_upgrade=_boolean(data, "forceUpgrade"),
            debug=_boolean(data, "debug"),
            values=_object(data, "set"),
            driver_container=_object(data, "driverContainer") or {},
            node_selector=_string_map(data, "nodeSelector"),
            dependencies=[SpecialResourceDependency.from_dict(d) for d in raw_dependencies],
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "chart": self.chart.to_dict(),
            "namespace": self.namespace,
            "forceUpgrade": self.force_upgrade,
            "debug": self.debug,
        }
        if self.values:
            out["set"] = copy.deepcopy(self.values)
        if self.driver_container:
            out["driverContainer"] = copy.deepcopy(self.driver_container)
        if self.node_selector:
            out["nodeSelector"] = dict(self.node_selector)
        if self.dependencies:
            out["dependencies"] = [d.to_dict() for d in self.dependencies]
        return out


@dataclass
class SpecialResourceStatus:
    """Observed state of a special resource."""

    state: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SpecialResourceStatus:
        return cls(state=_string(_mapping(data, "status"), "state"))

    def to_dict(self) -> dict[str, Any]:
        return {"state": self.state}


@dataclass
class SpecialResource:
    """A cluster-scoped SpecialResource object."""

    metadata: dict[str, Any] = field(default_factory=dict)
    spec: SpecialResourceSpec = field(default_factory=SpecialResourceSpec)
    status: SpecialResourceStatus = field(default_factory=SpecialResourceStatus)
    api_version: str = GROUP_VERSION
    kind: str = KIND

    @property
    def name(self) -> str:
        return self.metadata.get("name") or ""

    @name.setter
    def name(self, value: str) -> None:
        self.metadata["name"] = value

    @property
    def namespace(self) -> str:
        return self.metadata.get("namespace") or ""

    @property
    def finalizers(self) -> list[str]:
        return list(self.metadata.get("finalizers") or [])

    def is_marked_for_deletion(self) -> bool:
        """True once the object carries a deletion timestamp."""
        return self.metadata.get("deletionTimestamp") is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SpecialResource:
        data = _mapping(data, "special resource")
        return cls(
            metadata=_object(data, "metadata") or {},
            spec=SpecialResourceSpec.from_dict(data.get("spec")),
            status=SpecialResourceStatus.from_dict(data.get("status")),
            api_version=_string(data, "apiVersion") or GROUP_VERSION,
            kind=_string(data, "kind") or KIND,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": copy.deepcopy(self.metadata),
            "spec": self.spec.to_dict(),
            "status": self.status.to_dict(),
        }