import httpx
import pytest

from fakes import RecordingTransport
from paperpharmacy.domain.models import BookKey


@pytest.fixture
def book() -> BookKey:
    return BookKey(title="데미안", author="헤르만 헤세", isbn="978-89-374-6044-9")


@pytest.fixture
def offline_transport() -> RecordingTransport:
    """Transport answering 404 to everything, recording what was asked."""
    return RecordingTransport(lambda request: httpx.Response(404))


@pytest.fixture
def offline_client_factory(offline_transport: RecordingTransport):
    return lambda: httpx.AsyncClient(transport=offline_transport)
