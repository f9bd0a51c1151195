import pytest

from sroperator.api import SpecialResource
from sroperator.filter import (
    OWNED_LABEL,
    FilterError,
    is_special_resource,
    owned,
    set_label,
    set_sub_resource_label,
)


def _daemonset(template_labels=None):
    template_metadata = {} if template_labels is None else {"labels": template_labels}
    return {
        "apiVersion": "apps/v1",
        "kind": "DaemonSet",
        "metadata": {"name": "driver"},
        "spec": {"template": {"metadata": template_metadata}},
    }


def test_set_label_adds_owned_label_and_keeps_others():
    obj = {"kind": "ConfigMap", "metadata": {"name": "cm", "labels": {"app": "x"}}}
    set_label(obj)
    assert obj["metadata"]["labels"] == {"app": "x", OWNED_LABEL: "true"}


def test_set_label_creates_metadata_when_missing():
    obj = {"kind": "Secret"}
    set_label(obj)
    assert obj["metadata"]["labels"][OWNED_LABEL] == "true"


@pytest.mark.parametrize("kind", ["DaemonSet", "Deployment", "StatefulSet"])
def test_set_label_labels_pod_template(kind):
    obj = _daemonset({"app": "driver"})
    obj["kind"] = kind
    set_label(obj)
    assert obj["spec"]["template"]["metadata"]["labels"] == {
        "app": "driver",
        OWNED_LABEL: "true",
    }
    assert obj["metadata"]["labels"][OWNED_LABEL] == "true"


def test_workload_without_template_labels_raises():
    with pytest.raises(FilterError, match="Labels not found"):
        set_sub_resource_label(_daemonset())


def test_workload_without_spec_raises():
    with pytest.raises(FilterError, match="Labels not found"):
        set_sub_resource_label({"kind": "Deployment", "metadata": {}})


def test_workload_with_non_object_labels_raises():
    obj = _daemonset()
    obj["spec"]["template"]["metadata"]["labels"] = "oops"
    with pytest.raises(FilterError):
        set_sub_resource_label(obj)


def test_build_config_is_left_unchanged():
    obj = {"kind": "BuildConfig", "spec": {"output": {}}}
    set_sub_resource_label(obj)
    assert obj == {"kind": "BuildConfig", "spec": {"output": {}}}


def test_owned_by_owner_reference():
    obj = {"metadata": {"ownerReferences": [{"kind": "SpecialResource", "name": "a"}]}}
    assert owned(obj) is True


def test_owned_by_label():
    obj = {"metadata": {"labels": {OWNED_LABEL: "true"}}}
    assert owned(obj) is True


def test_not_owned():
    obj = {"metadata": {"labels": {"app": "x"}, "ownerReferences": [{"kind": "Deployment"}]}}
    assert owned(obj) is False


def test_set_label_makes_object_owned():
    obj = {"kind": "ConfigMap", "metadata": {"name": "cm"}}
    assert owned(obj) is False
    set_label(obj)
    assert owned(obj) is True


def test_is_special_resource_by_kind():
    assert is_special_resource({"kind": "SpecialResource", "metadata": {"name": "a"}}) is True


def test_is_special_resource_by_type():
    assert is_special_resource(SpecialResource(metadata={"name": "a"})) is True


def test_is_special_resource_by_self_link():
    obj = {"metadata": {"selfLink": "/apis/sro.openshift.io/v1beta1/specialresources/a"}}
    assert is_special_resource(obj) is True


def test_is_special_resource_without_kind_by_content():
    obj = {"apiVersion": "sro.openshift.io/v1beta1", "metadata": {"name": "a"}}
    assert is_special_resource(obj) is True


def test_owned_object_is_not_special_resource():
    obj = {
        "metadata": {
            "labels": {OWNED_LABEL: "true"},
            "selfLink": "/apis/sro.openshift.io/v1beta1/specialresources/a",
        }
    }
    assert is_special_resource(obj) is False


def test_plain_object_is_not_special_resource():
    obj = {"apiVersion": "v1", "kind": "ConfigMap", "metadata": {"name": "cm"}}
    assert is_special_resource(obj) is False