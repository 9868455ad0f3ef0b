import logging

from sspcommon.client import MemoryClient
from sspcommon.objects import KubeObject, ObjectKey
from sspcommon.request import Request


def _instance():
    return KubeObject(
        kind="SSP", api_version="ssp.kubevirt.io/v1beta1", name="test-ssp", namespace="kubevirt"
    )


def test_each_request_has_its_own_cache():
    first = Request(client=MemoryClient(), instance=_instance())
    second = Request(client=MemoryClient(), instance=_instance())
    first.version_cache.add(KubeObject(kind="Service", name="svc", uid="u1"))
    assert len(first.version_cache) == 1
    assert len(second.version_cache) == 0


def test_default_logger_is_a_logger():
    request = Request(client=MemoryClient(), instance=_instance())
    assert isinstance(request.logger, logging.Logger)
    assert request.name == ""