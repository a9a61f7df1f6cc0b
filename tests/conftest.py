import pytest

from pingrunner.src.services.client_credentials import Token
from tests.helpers.fakes import FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def expired_token(clock):
    return Token(value="old", expires_at=clock.now - 1)


@pytest.fixture
def fresh_token(clock):
    return Token(value="fresh", expires_at=clock.now + 600)
