"""Remembers the versions of objects the operator has written."""

from __future__ import annotations

from typing import NamedTuple

from sspcommon.objects import KubeObject


class _CacheKey(NamedTuple):
    kind: str
    name: str
    namespace: str


class _CacheValue(NamedTuple):
    uid: str
    resource_version: str
    generation: int


def _key(obj: KubeObject) -> _CacheKey:
    return _CacheKey(obj.kind, obj.name, obj.namespace)


class VersionCache:
    """Records uid, resource version and generation of written objects."""

    def __init__(self) -> None:
        self._entries: dict[_CacheKey, _CacheValue] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def contains(self, obj: KubeObject) -> bool:
        """Return True if the object is unchanged since it was recorded."""
        cached = self._entries.get(_key(obj))
        if cached is None or obj.uid != cached.uid:
            return False
        if obj.generation == 0:
            return obj.resource_version != "" and obj.resource_version == cached.resource_version
        return cached.generation == obj.generation

    def add(self, obj: KubeObject) -> None:
        """Record the object's current version; objects without kind are ignored."""
        if not obj.kind:
            return
        self._entries[_key(obj)] = _CacheValue(obj.uid, obj.resource_version, obj.generation)

    def remove(self, obj: KubeObject) -> None:
        """Forget the object."""
        self._entries.pop(_key(obj), None)