# sspcommon

Helpers for a reconciliation loop that keeps a set of cluster resources
in the state that an owning custom resource describes.

The package works on plain Python objects and comes with an in-memory
client, so the reconcile logic can be used and tested without a cluster.

## Installation

    pip install sspcommon

With the test dependencies:

    pip install "sspcommon[test]"

## Modules

- `sspcommon.objects`: `KubeObject`, `ObjectKey` and `OwnerReference`.
  `KubeObject` is a dataclass with kind, API version, name, namespace,
  uid, resource version, generation, labels, annotations, owner
  references, finalizers, deletion timestamp, `spec` and `status`. It
  has three methods. `key()` returns its `ObjectKey`. `copy()` returns a
  deep copy. `is_being_deleted()` reports whether a deletion timestamp
  is set.
- `sspcommon.client`: `MemoryClient`, an in-memory store with `get`,
  `create`, `update` and `delete`.
  - `get` returns a copy of the stored object.
  - `create` assigns a uid and a resource version.
  - `update` bumps the resource version. It raises an `ApiError` with
    reason `"Conflict"` when the given resource version is stale.
  - `delete` removes an object at once when it has no finalizers.
    Otherwise it only sets the object's deletion timestamp.

  Missing objects raise `NotFoundError` and duplicates raise
  `AlreadyExistsError`. Both are subclasses of `ApiError`, which carries
  a `reason`.
- `sspcommon.cache`: `VersionCache`, which records the uid, resource
  version and generation of objects the operator has written. `contains`
  tells whether an object is unchanged since it was recorded. It
  compares the generation, or the resource version when the generation
  is 0. `add` ignores objects without a kind, and `remove` forgets an
  object.
- `sspcommon.labels`: `AppComponent` (with `MONITORING`, `SCHEDULE` and
  `TEMPLATING`) and `add_app_labels`.
  - `add_app_labels` sets the `app.kubernetes.io/name`, `component` and
    `managed-by` (`ssp-operator`) labels.
  - When the instance has labels, it also copies `part-of` and `version`
    from the instance.
- `sspcommon.environment`: `env_or_default` returns a variable's value,
  or the default when the variable is unset or empty.
  `get_operator_version` reads `OPERATOR_VERSION` and falls back to
  `devel`.
- `sspcommon.request`: `Request`, a dataclass that bundles the client,
  the owning instance, a logger and the version cache for one reconcile
  pass.
- `sspcommon.resource`: the reconcile functions.
  - `create_or_update(request)` returns a `ReconcileBuilder` with
    `namespaced_resource`, `cluster_resource`, `with_app_labels`,
    `update_func`, `status_func` and `reconcile`.
  - `reconcile` returns a `ReconcileResult`, whose `operation_result` is
    an `OperationResult`: `NONE`, `CREATED` or `UPDATED`.
  - `cleanup` and `delete_all` delete owned resources and return
    `CleanupResult` values.
  - `collect_resource_status` runs reconcile functions in order. Any
    exception they raise propagates.

## Example

    from sspcommon.cache import VersionCache
    from sspcommon.client import MemoryClient
    from sspcommon.labels import AppComponent
    from sspcommon.objects import KubeObject
    from sspcommon.request import Request
    from sspcommon.resource import OperationResult, cleanup, create_or_update

    client = MemoryClient()
    instance = KubeObject(kind="SSP", api_version="ssp.kubevirt.io/v1beta1",
                          name="test-ssp", namespace="kubevirt", uid="uid-1")
    request = Request(client=client, instance=instance,
                      version_cache=VersionCache())

    service = KubeObject(kind="Service", name="testservice",
                         namespace="kubevirt", spec={"ports": [443]})

    result = (
        create_or_update(request)
        .namespaced_resource(service)
        .with_app_labels("template-validator", AppComponent.TEMPLATING)
        .update_func(lambda expected, found: found.spec.update(expected.spec))
        .reconcile()
    )
    assert result.operation_result is OperationResult.CREATED

    cleanup(request, service).deleted   # False: deletion was just issued
    cleanup(request, service).deleted   # True: the object is gone

## Ownership

A namespaced resource gets a controller owner reference to the instance.
A cluster resource gets owner annotations instead:
`operator-sdk/primary-resource-type` and `operator-sdk/primary-resource`.

The update function is only called when the version cache shows that
the found object was changed by someone else.

When the found object is being deleted, it is left alone. It is then
reported with the status message "Resource is being deleted." for
progressing, not-available and degraded.

`cleanup` reports an object as deleted in two cases: when it no longer
exists, and when the object that now has its name is not owned by the
instance.

## What it does not do

The package has no client for a real cluster API server. `MemoryClient`
is the only store provided. There is no command-line program, no
controller manager that watches for changes, and no metrics export.