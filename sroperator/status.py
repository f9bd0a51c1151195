"""Related objects and operand versions reported in the cluster operator status."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Mapping

from sroperator.api import GROUP, SpecialResource

__all__ = [
    "OPERATOR_NAME",
    "OPERATOR_NAMESPACE",
    "RELEASE_VERSION_ENV",
    "ObjectReference",
    "OperandVersion",
    "related_objects",
    "set_operand_version",
    "release_operand_versions",
]

OPERATOR_NAME = "special-resource-operator"
OPERATOR_NAMESPACE = "openshift-special-resource-operator"
RELEASE_VERSION_ENV = "RELEASE_VERSION"

_OPERAND_NAME = "operator"


@dataclass(frozen=True)
class ObjectReference:
    """A reference to an object related to the cluster operator."""

    group: str
    resource: str
    name: str
    namespace: str = ""

    def to_dict(self) -> dict[str, str]:
        out = {"group": self.group, "resource": self.resource, "name": self.name}
        if self.namespace:
            out["namespace"] = self.namespace
        return out


@dataclass(frozen=True)
class OperandVersion:
    """The version of one operand of the cluster operator."""

    name: str
    version: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "version": self.version}


def related_objects(special_resources: Iterable[SpecialResource]) -> list[ObjectReference]:
    """The operator namespace, the SpecialResource type and every special resource namespace.

    Special resources without a namespace, such as the preamble, are left out.
    """
    refs = [
        ObjectReference(group="", resource="namespaces", name=OPERATOR_NAMESPACE),
        ObjectReference(group=GROUP, resource="specialresources", name=""),
    ]
    refs.extend(
        ObjectReference(group="", resource="namespaces", name=sr.spec.namespace)
        for sr in special_resources
        if sr.spec.namespace
    )
    return refs


def set_operand_version(
    versions: Iterable[OperandVersion] | None, name: str, version: str
) -> list[OperandVersion]:
    """A copy of ``versions`` with the operand ``name`` set to ``version``.

    An existing entry keeps its position; a new one is appended.
    """
    updated: list[OperandVersion] = []
    found = False
    for entry in versions or ():
        if not found and entry.name == name:
            updated.append(OperandVersion(name, version))
            found = True
        else:
            updated.append(entry)
    if not found:
        updated.append(OperandVersion(name, version))
    return updated


def release_operand_versions(
    versions: Iterable[OperandVersion] | None,
    environ: Mapping[str, str] | None = None,
) -> list[OperandVersion]:
    """Record the release version from the environment as the operator's operand version."""
    env = os.environ if environ is None else environ
    release = env.get(RELEASE_VERSION_ENV, "")
    if release:
        return set_operand_version(versions, _OPERAND_NAME, release)
    return list(versions or ())