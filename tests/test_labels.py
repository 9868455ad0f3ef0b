import pytest

from sspcommon.labels import (
    APP_KUBERNETES_COMPONENT_LABEL,
    APP_KUBERNETES_MANAGED_BY_LABEL,
    APP_KUBERNETES_NAME_LABEL,
    APP_KUBERNETES_PART_OF_LABEL,
    APP_KUBERNETES_VERSION_LABEL,
    AppComponent,
    add_app_labels,
)
from sspcommon.objects import KubeObject


@pytest.fixture
def instance():
    return KubeObject(
        kind="SSP",
        api_version="ssp.kubevirt.io/v1beta1",
        name="test-ssp",
        namespace="kubevirt",
        labels={
            APP_KUBERNETES_PART_OF_LABEL: "tests",
            APP_KUBERNETES_VERSION_LABEL: "v0.0.0-tests",
        },
    )


def config_map():
    return KubeObject(kind="ConfigMap", api_version="v1")


def test_adds_app_labels_from_request(instance):
    obj = add_app_labels(instance, "test", AppComponent("testing"), config_map())
    assert obj.labels[APP_KUBERNETES_PART_OF_LABEL] == "tests"
    assert obj.labels[APP_KUBERNETES_VERSION_LABEL] == "v0.0.0-tests"


def test_does_not_add_app_labels_on_none(instance):
    instance.labels = None
    obj = add_app_labels(instance, "test", AppComponent("testing"), config_map())
    assert obj.labels.get(APP_KUBERNETES_PART_OF_LABEL, "") == ""
    assert obj.labels.get(APP_KUBERNETES_VERSION_LABEL, "") == ""


def test_does_not_add_app_labels_empty_map(instance):
    instance.labels = {}
    obj = add_app_labels(instance, "test", AppComponent("testing"), config_map())
    assert obj.labels[APP_KUBERNETES_PART_OF_LABEL] == ""
    assert obj.labels[APP_KUBERNETES_VERSION_LABEL] == ""


def test_adds_dynamic_app_labels(instance):
    obj = add_app_labels(instance, "test", AppComponent("testing"), config_map())
    assert obj.labels[APP_KUBERNETES_COMPONENT_LABEL] == "testing"
    assert obj.labels[APP_KUBERNETES_NAME_LABEL] == "test"


def test_adds_managed_by_label(instance):
    obj = add_app_labels(instance, "test", AppComponent("testing"), config_map())
    assert obj.labels[APP_KUBERNETES_MANAGED_BY_LABEL] == "ssp-operator"


def test_keeps_existing_labels(instance):
    obj = config_map()
    obj.labels = {"other": "kept"}
    result = add_app_labels(instance, "test", AppComponent.TEMPLATING, obj)
    assert result is obj
    assert obj.labels["other"] == "kept"
    assert obj.labels[APP_KUBERNETES_COMPONENT_LABEL] == "templating"


@pytest.mark.parametrize(
    ("component", "expected"),
    [
        (AppComponent.MONITORING, "monitoring"),
        (AppComponent.SCHEDULE, "schedule"),
        (AppComponent.TEMPLATING, "templating"),
    ],
)
def test_predefined_components_set_component_label(instance, component, expected):
    obj = add_app_labels(instance, "operand", component, config_map())
    assert obj.labels[APP_KUBERNETES_COMPONENT_LABEL] == expected
    assert obj.labels[APP_KUBERNETES_NAME_LABEL] == "operand"