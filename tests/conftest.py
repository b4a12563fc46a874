"""Unit testing configuration"""

import os
from unittest.mock import MagicMock

import httpx
import pytest

from rest_firebase import Binder, Reference, factory
from tests.constants import AUTH, PATHS, ROOT_URL
from tests.fake_firebase import FakeFirebase

"""
Pytest config section
"""


def pytest_addoption(parser):
    """
    Add Option
    -------

    """
    parser.addoption(
        "--firebase",
        action="store_true",
        dest="firebase",
        default=False,
        help="enable Firebase Realtime Database Emulator tests",
    )


"""
Fake database section
"""


@pytest.fixture(name="server")
def fake_firebase_fixture() -> FakeFirebase:
    return FakeFirebase()


@pytest.fixture
def transport(server: FakeFirebase) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=server.app)


@pytest.fixture
def warn_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def binder() -> Binder:
    return factory(ROOT_URL)


@pytest.fixture
def ref(
    binder: Binder, transport: httpx.ASGITransport, warn_logger: MagicMock
) -> Reference:
    """
    Reference to `foo/bar`, authenticated, talking to the fake database.
    """
    return binder(
        paths=PATHS, auth=AUTH, logger=warn_logger, transport=transport
    )


"""
Emulator section
"""


@pytest.fixture
def emulator_binder() -> Binder:
    return factory(
        os.environ.get("REST_FIREBASE_EMULATOR_URL", "http://127.0.0.1:9000")
    )
