"""Plain in-memory representation of cluster objects."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class OwnerReference:
    """Reference from a dependent object to its owner."""

    api_version: str
    kind: str
    name: str
    uid: str
    controller: bool = False
    block_owner_deletion: bool = False


@dataclass(frozen=True)
class ObjectKey:
    """Identifies an object by kind, namespace and name."""

    name: str
    namespace: str = ""
    kind: str = ""


@dataclass
class KubeObject:
    """A cluster object: type information, metadata and free-form content."""

    kind: str = ""
    api_version: str = ""
    name: str = ""
    namespace: str = ""
    uid: str = ""
    resource_version: str = ""
    generation: int = 0
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None
    owner_references: list[OwnerReference] = field(default_factory=list)
    finalizers: list[str] = field(default_factory=list)
    deletion_timestamp: datetime | None = None
    spec: dict[str, Any] = field(default_factory=dict)
    status: dict[str, Any] = field(default_factory=dict)

    def key(self) -> ObjectKey:
        """Return the key that identifies this object."""
        return ObjectKey(name=self.name, namespace=self.namespace, kind=self.kind)

    def copy(self) -> "KubeObject":
        """Return a deep copy of this object."""
        return _copy.deepcopy(self)

    def is_being_deleted(self) -> bool:
        """Return True when a deletion timestamp has been set."""
        return self.deletion_timestamp is not None