import pytest
from fastapi.testclient import TestClient

from uuidshort.main import app
from uuidshort.api.dependencies import get_short_uuid
from uuidshort.services.shortuuid import ShortUUID


BINARY_ALPHABET = "01"
BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


@pytest.fixture
def codec():
    """Codec over the default alphabet."""
    return ShortUUID()


@pytest.fixture
def client():
    """Creates a test client using the configured alphabet."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def binary_client():
    """Creates a test client whose codec only knows '0' and '1'."""
    def override_get_short_uuid():
        return ShortUUID(BINARY_ALPHABET)

    app.dependency_overrides[get_short_uuid] = override_get_short_uuid
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_uuids():
    """Provides identifiers spanning the 128-bit range."""
    return [
        "00000000-0000-0000-0000-000000000000",
        "00000000-0000-0000-0000-000000000001",
        "3b1f8b40-222c-4a6e-b77e-779d5a94e21c",
        "ffffffff-ffff-ffff-ffff-ffffffffffff",
    ]
