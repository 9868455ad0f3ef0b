"""An in-memory object store with the semantics of a cluster API client."""

from __future__ import annotations

import itertools
import uuid
from datetime import datetime, timezone

from sspcommon.objects import KubeObject, ObjectKey


class ApiError(Exception):
    """An error reported by the object store."""

    reason = "Unknown"

    def __init__(self, message: str, reason: str | None = None) -> None:
        super().__init__(message)
        if reason is not None:
            self.reason = reason


class NotFoundError(ApiError):
    """The requested object does not exist."""

    reason = "NotFound"


class AlreadyExistsError(ApiError):
    """An object with the same key already exists."""

    reason = "AlreadyExists"


class MemoryClient:
    """Stores objects in memory, keyed by kind, namespace and name."""

    def __init__(self) -> None:
        self._objects: dict[ObjectKey, KubeObject] = {}
        self._versions = itertools.count(1)

    def _next_version(self) -> str:
        return str(next(self._versions))

    def _stored(self, key: ObjectKey) -> KubeObject:
        try:
            return self._objects[key]
        except KeyError:
            raise NotFoundError(f'{key.kind} "{key.name}" not found') from None

    def get(self, key: ObjectKey) -> KubeObject:
        """Return a copy of the stored object with the given key."""
        return self._stored(key).copy()

    def create(self, obj: KubeObject) -> None:
        """Store a new object, filling in its uid and resource version."""
        if not obj.name:
            raise ApiError("name is required", reason="Invalid")
        if obj.resource_version:
            raise ApiError(
                "resourceVersion can not be set for Create requests", reason="BadRequest"
            )
        key = obj.key()
        if key in self._objects:
            raise AlreadyExistsError(f'{key.kind} "{key.name}" already exists')
        if not obj.uid:
            obj.uid = str(uuid.uuid4())
        obj.deletion_timestamp = None
        obj.resource_version = self._next_version()
        self._objects[key] = obj.copy()

    def update(self, obj: KubeObject) -> None:
        """Replace a stored object, bumping its resource version."""
        key = obj.key()
        stored = self._stored(key)
        if obj.resource_version and obj.resource_version != stored.resource_version:
            raise ApiError(
                f'the object "{key.name}" has been modified', reason="Conflict"
            )
        obj.uid = stored.uid
        obj.deletion_timestamp = stored.deletion_timestamp
        obj.resource_version = self._next_version()
        if obj.is_being_deleted() and not obj.finalizers:
            del self._objects[key]
            return
        self._objects[key] = obj.copy()

    def delete(self, obj: KubeObject) -> None:
        """Delete an object, or mark it as being deleted while it has finalizers."""
        key = obj.key()
        stored = self._stored(key)
        if not stored.finalizers:
            del self._objects[key]
            return
        if not stored.is_being_deleted():
            stored.deletion_timestamp = datetime.now(timezone.utc)
            stored.resource_version = self._next_version()