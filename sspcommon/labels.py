"""Standard application labels put on objects the operator manages."""

from __future__ import annotations

from typing import ClassVar

from sspcommon.objects import KubeObject

APP_KUBERNETES_NAME_LABEL = "app.kubernetes.io/name"
APP_KUBERNETES_PART_OF_LABEL = "app.kubernetes.io/part-of"
APP_KUBERNETES_VERSION_LABEL = "app.kubernetes.io/version"
APP_KUBERNETES_MANAGED_BY_LABEL = "app.kubernetes.io/managed-by"
APP_KUBERNETES_COMPONENT_LABEL = "app.kubernetes.io/component"

MANAGED_BY = "ssp-operator"


class AppComponent(str):
    """Name of the component an operand belongs to."""

    MONITORING: ClassVar["AppComponent"]
    SCHEDULE: ClassVar["AppComponent"]
    TEMPLATING: ClassVar["AppComponent"]


AppComponent.MONITORING = AppComponent("monitoring")
AppComponent.SCHEDULE = AppComponent("schedule")
AppComponent.TEMPLATING = AppComponent("templating")


def add_app_labels(
    instance: KubeObject, name: str, component: str, obj: KubeObject
) -> KubeObject:
    """Set name, component and managed-by labels, and copy instance-wide ones."""
    if obj.labels is None:
        obj.labels = {}
    labels = obj.labels

    if instance.labels is not None:
        for key in (APP_KUBERNETES_PART_OF_LABEL, APP_KUBERNETES_VERSION_LABEL):
            labels[key] = instance.labels.get(key, "")

    labels[APP_KUBERNETES_NAME_LABEL] = name
    labels[APP_KUBERNETES_COMPONENT_LABEL] = str(component)
    labels[APP_KUBERNETES_MANAGED_BY_LABEL] = MANAGED_BY
    return obj