"""Looking up special resources and building new ones from charts."""

from __future__ import annotations

import copy
from typing import Any, Mapping, Sequence

from sroperator.api import GROUP_VERSION, SpecialResource, SpecialResourceSpec
from sroperator.helmer_types import HelmChart, HelmRepo

__all__ = [
    "VALUES_KIND",
    "DependencyNotFound",
    "find_sr",
    "dependency_from",
    "special_resource_from_chart",
    "with_values_kind",
]

VALUES_KIND = "Values"


class DependencyNotFound(LookupError):
    """Raised when a dependency is not among the listed special resources."""


def find_sr(special_resources: Sequence[SpecialResource], name: str) -> int | None:
    """Index of the first special resource called ``name``, or None."""
    return next(
        (index for index, sr in enumerate(special_resources) if sr.name == name),
        None,
    )


def dependency_from(special_resources: Sequence[SpecialResource], name: str) -> SpecialResource:
    """The special resource called ``name``; raises DependencyNotFound if there is none."""
    index = find_sr(special_resources, name)
    if index is None:
        raise DependencyNotFound("Not found")
    return special_resources[index]


def with_values_kind(values: Mapping[str, Any] | None) -> dict[str, Any]:
    """A copy of the values marked as kind Values of the special resource API."""
    marked = copy.deepcopy(dict(values)) if values else {}
    marked["kind"] = VALUES_KIND
    marked["apiVersion"] = GROUP_VERSION
    return marked


def special_resource_from_chart(name: str, version: str, repository: HelmRepo) -> SpecialResource:
    """A new special resource for a dependency chart, installed into a namespace of its name.

    Only the repository's name and URL are carried over.
    """
    chart = HelmChart(
        name=name,
        version=version,
        repository=HelmRepo(name=repository.name, url=repository.url),
        tags=[],
    )
    spec = SpecialResourceSpec(
        chart=chart,
        namespace=name,
        values=with_values_kind(None),
        dependencies=[],
    )
    return SpecialResource(metadata={"name": name}, spec=spec)