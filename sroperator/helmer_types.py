"""Helm chart and repository references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

__all__ = ["HelmRepo", "HelmChart"]


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


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


@dataclass
class HelmRepo:
    """Where a chart is fetched from and how to authenticate."""

    name: str = ""
    url: str = ""
    username: str = ""
    password: str = ""
    cert_file: str = ""
    key_file: str = ""
    ca_file: str = ""
    insecure_skip_tls_verify: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> HelmRepo:
        data = _mapping(data, "repository")
        return cls(
            name=_string(data, "name"),
            url=_string(data, "url"),
            username=_string(data, "username"),
            password=_string(data, "password"),
            cert_file=_string(data, "certFile"),
            key_file=_string(data, "keyFile"),
            ca_file=_string(data, "caFile"),
            insecure_skip_tls_verify=_boolean(data, "insecure_skip_tls_verify"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "url": self.url,
            "username": self.username,
            "password": self.password,
            "certFile": self.cert_file,
            "keyFile": self.key_file,
            "caFile": self.ca_file,
            "insecure_skip_tls_verify": self.insecure_skip_tls_verify,
        }


@dataclass
class HelmChart:
    """A chart name and version in a repository."""

    name: str = ""
    version: str = ""
    repository: HelmRepo = field(default_factory=HelmRepo)
    tags: list[str] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> HelmChart:
        data = _mapping(data, "chart")
        tags = data.get("tags")
        if tags is not None:
            if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
                raise TypeError("field 'tags' must be a list of strings")
            tags = list(tags)
        return cls(
            name=_string(data, "name"),
            version=_string(data, "version"),
            repository=HelmRepo.from_dict(data.get("repository")),
            tags=tags,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "repository": self.repository.to_dict(),
            "tags": None if self.tags is None else list(self.tags),
        }