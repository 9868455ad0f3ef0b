"""The context handed to every reconcile step."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sspcommon.cache import VersionCache
from sspcommon.client import MemoryClient
from sspcommon.objects import KubeObject


@dataclass
class Request:
    """One reconcile request: the client, the owning instance and shared state."""

    client: MemoryClient
    instance: KubeObject
    name: str = ""
    namespace: str = ""
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("sspcommon"))
    version_cache: VersionCache = field(default_factory=VersionCache)