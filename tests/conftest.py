from datetime import datetime

import pytest
from fakes import RULES_PATH, FakeRemoteStore, RecordingRenderContext

from storefront.adapters.clock import FixedClock
from storefront.adapters.local_storage import MemoryStorage
from storefront.domain.entities import User
from storefront.rules.loader import load_rules

# --- Fixtures ---


@pytest.fixture
def rules():
    return load_rules(RULES_PATH)


@pytest.fixture
def remote():
    return FakeRemoteStore()


@pytest.fixture
def clock():
    return FixedClock(datetime(2025, 3, 14, 9, 26, 53))


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def render_context():
    return RecordingRenderContext()


@pytest.fixture
def admin():
    return User(id="u-admin", username="admin", role="admin", permissions=[])


@pytest.fixture
def staff():
    return User(id="u-staff", username="clerk", role="staff", permissions=["orders"])
