import pytest

from sroperator.api import SpecialResource, SpecialResourceSpec
from sroperator.status import (
    ObjectReference,
    OperandVersion,
    related_objects,
    release_operand_versions,
    set_operand_version,
)


def _sr(name, namespace):
    sr = SpecialResource(spec=SpecialResourceSpec(namespace=namespace))
    sr.name = name
    return sr


def test_related_objects_defaults():
    refs = related_objects([])
    assert refs == [
        ObjectReference("", "namespaces", "openshift-special-resource-operator"),
        ObjectReference("sro.openshift.io", "specialresources", ""),
    ]


def test_related_objects_adds_namespaces_in_order_and_skips_empty():
    srs = [_sr("special-resource-preamble", ""), _sr("a", "ns-a"), _sr("b", "ns-b")]
    refs = related_objects(srs)
    assert len(refs) == 4
    assert [r.name for r in refs[2:]] == ["ns-a", "ns-b"]
    assert all(r.resource == "namespaces" and r.group == "" for r in refs[2:])


def test_object_reference_to_dict():
    ref = ObjectReference("", "namespaces", "ns-a")
    assert ref.to_dict() == {"group": "", "resource": "namespaces", "name": "ns-a"}


def test_set_operand_version_appends_when_missing():
    existing = [OperandVersion("other", "1")]
    result = set_operand_version(existing, "operator", "2")
    assert result == [OperandVersion("other", "1"), OperandVersion("operator", "2")]
    assert existing == [OperandVersion("other", "1")]


def test_set_operand_version_updates_in_place_position():
    existing = [OperandVersion("operator", "1"), OperandVersion("other", "x")]
    result = set_operand_version(existing, "operator", "2")
    assert result == [OperandVersion("operator", "2"), OperandVersion("other", "x")]


def test_set_operand_version_from_none():
    assert set_operand_version(None, "operator", "3") == [OperandVersion("operator", "3")]


def test_release_operand_versions_uses_environment():
    result = release_operand_versions([], {"RELEASE_VERSION": "4.9.0"})
    assert result == [OperandVersion("operator", "4.9.0")]


@pytest.mark.parametrize("environ", [{}, {"RELEASE_VERSION": ""}])
def test_release_operand_versions_without_release(environ):
    existing = [OperandVersion("operator", "1")]
    assert release_operand_versions(existing, environ) == existing


def test_release_operand_versions_reads_os_environ(monkeypatch):
    monkeypatch.setenv("RELEASE_VERSION", "7.7")
    assert release_operand_versions(None) == [OperandVersion("operator", "7.7")]