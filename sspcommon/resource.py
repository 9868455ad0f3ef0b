"""Create, update and clean up objects owned by an operator instance."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

from sspcommon.client import NotFoundError
from sspcommon.labels import add_app_labels
from sspcommon.objects import KubeObject, OwnerReference
from sspcommon.request import Request

TYPE_ANNOTATION = "operator-sdk/primary-resource-type"
NAMESPACED_NAME_ANNOTATION = "operator-sdk/primary-resource"

ResourceUpdateFunc = Callable[[KubeObject, KubeObject], None]


class OperationResult(str, enum.Enum):
    """What happened to an object during create-or-update."""

    NONE = "unchanged"
    CREATED = "created"
    UPDATED = "updated"


@dataclass
class ResourceStatus:
    """Condition messages of a resource; None means the condition is not set."""

    progressing: str | None = None
    not_available: str | None = None
    degraded: str | None = None


ResourceStatusFunc = Callable[[KubeObject], ResourceStatus]


@dataclass
class ReconcileResult:
    """Outcome of reconciling one resource."""

    status: ResourceStatus
    resource: KubeObject
    operation_result: OperationResult = OperationResult.NONE


@dataclass
class CleanupResult:
    """Outcome of cleaning up one resource; deleted is True once it is gone."""

    resource: KubeObject
    deleted: bool


def collect_resource_status(request: Request, *funcs) -> list[ReconcileResult]:
    """Run each reconcile function in order and collect their results."""
    return [func(request) for func in funcs]


def _group(api_version: str) -> str:
    group, sep, _ = api_version.rpartition("/")
    return group if sep else ""


def _same_owner(a: OwnerReference, b: OwnerReference) -> bool:
    return (_group(a.api_version), a.kind, a.name) == (_group(b.api_version), b.kind, b.name)


def _set_owner_annotations(owner: KubeObject, obj: KubeObject) -> None:
    if not owner.kind:
        raise ValueError("owner kind must not be empty")
    obj.annotations = obj.annotations if obj.annotations is not None else {}
    obj.annotations[NAMESPACED_NAME_ANNOTATION] = f"{owner.namespace}/{owner.name}"
    obj.annotations[TYPE_ANNOTATION] = f"{owner.kind}.{_group(owner.api_version)}"


def _set_controller_reference(owner: KubeObject, obj: KubeObject) -> None:
    if owner.namespace and obj.namespace != owner.namespace:
        raise ValueError(
            f"owner in namespace {owner.namespace!r} cannot own object "
            f"in namespace {obj.namespace!r}"
        )
    if not owner.kind:
        raise ValueError("owner kind must not be empty")
    reference = OwnerReference(
        api_version=owner.api_version,
        kind=owner.kind,
        name=owner.name,
        uid=owner.uid,
        controller=True,
        block_owner_deletion=True,
    )
    if any(ref.controller and not _same_owner(ref, reference) for ref in obj.owner_references):
        raise ValueError(f"Object {obj.namespace}/{obj.name} is already owned by another controller")
    others = [ref for ref in obj.owner_references if not _same_owner(ref, reference)]
    obj.owner_references = others + [reference]


def _set_owner(request: Request, resource: KubeObject, is_cluster_resource: bool) -> None:
    if is_cluster_resource:
        resource.owner_references = []
        _set_owner_annotations(request.instance, resource)
        return
    if resource.annotations is not None:
        resource.annotations.pop(NAMESPACED_NAME_ANNOTATION, None)
        resource.annotations.pop(TYPE_ANNOTATION, None)
    _set_controller_reference(request.instance, resource)


def _merged(expected: dict[str, str] | None, found: dict[str, str] | None):
    if found is None:
        return None if expected is None else dict(expected)
    found.update(expected or {})
    return found


def _create_or_update(
    request: Request,
    resource: KubeObject,
    is_cluster_resource: bool,
    update_resource: ResourceUpdateFunc,
    status_func: ResourceStatusFunc,
) -> ReconcileResult:
    _set_owner(request, resource, is_cluster_resource)

    def mutate(found: KubeObject) -> None:
        if found.is_being_deleted():
            return
        found.owner_references = list(resource.owner_references)
        found.labels = _merged(resource.labels, found.labels)
        found.annotations = _merged(resource.annotations, found.annotations)
        if not request.version_cache.contains(found):
            update_resource(resource, found)

    try:
        try:
            found = request.client.get(resource.key())
        except NotFoundError:
            found = KubeObject(
                kind=resource.kind,
                api_version=resource.api_version,
                name=resource.name,
                namespace=resource.namespace,
            )
            mutate(found)
            request.client.create(found)
            result = OperationResult.CREATED
        else:
            existing = found.copy()
            mutate(found)
            result = OperationResult.NONE
            if found != existing:
                request.client.update(found)
                result = OperationResult.UPDATED
    except Exception as err:
        request.logger.debug("Resource create/update failed: %s", err)
        raise

    if found.is_being_deleted():
        request.version_cache.remove(found)
        message = "Resource is being deleted."
        return ReconcileResult(ResourceStatus(message, message, message), resource, result)

    request.version_cache.add(found)
    if result is not OperationResult.NONE:
        request.logger.info("%s %s resource: %s", result.value.capitalize(), found.kind, found.name)
    return ReconcileResult(status_func(found), resource, result)


class ReconcileBuilder:
    """Collects what is needed to reconcile one resource, then reconciles it."""

    def __init__(self, request: Request):
        self.request = request
        self.resource: KubeObject | None = None
        self.is_cluster_resource = False
        self.labels: tuple[str, str] | None = None
        self._update: ResourceUpdateFunc = lambda expected, found: None
        self._status: ResourceStatusFunc = lambda found: ResourceStatus()

    def namespaced_resource(self, resource: KubeObject) -> "ReconcileBuilder":
        """Reconcile a namespaced resource, owned through an owner reference."""
        self.resource, self.is_cluster_resource = resource, False
        return self

    def cluster_resource(self, resource: KubeObject) -> "ReconcileBuilder":
        """Reconcile a cluster resource, owned through owner annotations."""
        self.resource, self.is_cluster_resource = resource, True
        return self

    def with_app_labels(self, name: str, component: str) -> "ReconcileBuilder":
        """Add the standard application labels before reconciling."""
        self.labels = (name, component)
        return self

    def update_func(self, func: ResourceUpdateFunc) -> "ReconcileBuilder":
        """Set the function that copies expected content onto the found object."""
        self._update = func
        return self

    def status_func(self, func: ResourceStatusFunc) -> "ReconcileBuilder":
        """Set the function that computes the status of the found object."""
        self._status = func
        return self

    def reconcile(self) -> ReconcileResult:
        """Create or update the resource and report its status."""
        if self.resource is None:
            raise ValueError("no resource to reconcile")
        if self.labels is not None:
            add_app_labels(self.request.instance, *self.labels, self.resource)
        return _create_or_update(
            self.request, self.resource, self.is_cluster_resource, self._update, self._status
        )


def create_or_update(request: Request) -> ReconcileBuilder:
    """Start building a create-or-update of one resource."""
    if request is None:
        raise ValueError("Request should not be nil")
    return ReconcileBuilder(request)


def _is_resource_owned(request: Request, expected: KubeObject, found: KubeObject) -> bool:
    instance = request.instance
    if expected.namespace == instance.namespace:
        expected.owner_references = []
        _set_controller_reference(instance, expected)
    _set_owner_annotations(instance, expected)

    if expected.owner_references and expected.owner_references[0] in found.owner_references:
        return True
    if found.annotations is None:
        return False
    wanted = expected.annotations or {}
    return all(
        found.annotations.get(key, "") == wanted.get(key, "")
        for key in (TYPE_ANNOTATION, NAMESPACED_NAME_ANNOTATION)
    )


def cleanup(request: Request, resource: KubeObject) -> CleanupResult:
    """Delete the resource if this instance owns it; report whether it is gone."""
    try:
        found = request.client.get(resource.key())
    except NotFoundError:
        return CleanupResult(resource, True)

    if not _is_resource_owned(request, resource, found):
        # The owned object was replaced by an unrelated one with the same name.
        return CleanupResult(resource, True)

    if not found.is_being_deleted():
        try:
            request.client.delete(found)
        except NotFoundError:
            return CleanupResult(resource, True)
        except Exception as err:
            request.logger.error('Error deleting "%s": %s', resource.name, err)
            raise
    return CleanupResult(resource, False)


def delete_all(request: Request, *resources: KubeObject) -> list[CleanupResult]:
    """Clean up every resource in order."""
    return [cleanup(request, resource) for resource in resources]