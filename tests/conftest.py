import pytest


@pytest.fixture(autouse=True)
def _fast_bcrypt(monkeypatch):
    # Lowest cost factor keeps password tests quick.
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")


@pytest.fixture
def fake_db():
    from tests.support import FakeDatabase

    return FakeDatabase()
