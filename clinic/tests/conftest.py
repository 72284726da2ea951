import pytest
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

from clinic.identity import IdentityContext
from clinic.services.context import ServiceContext


@pytest.fixture
def ctx():
    """A fresh service context with the default (NotFound on empty) policy."""
    return ServiceContext()


@pytest.fixture
def lenient_ctx():
    """Same stores, but empty list queries return ``[]``."""
    return ServiceContext(empty_result_is_error=False)


@pytest.fixture
def p1():
    return IdentityContext.for_principal('p1')


@pytest.fixture
def p2():
    return IdentityContext.for_principal('p2')


@pytest.fixture
def channel_layer():
    layer = get_channel_layer()
    yield layer
    async_to_sync(layer.flush)()
