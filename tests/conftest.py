"""Shared test fixtures."""

import random

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from yzcore.api.rolls import get_roll_cache
from yzcore.infra.cache import RollCache
from yzcore.main import app


class ScriptedRandom(random.Random):
    """Random source that returns pre-recorded faces, in order."""

    def __init__(self, faces=()):
        super().__init__(0)
        self.faces = list(faces)

    def queue(self, *faces):
        self.faces.extend(faces)

    def randint(self, a, b):
        value = self.faces.pop(0)
        assert a <= value <= b, f"scripted face {value} outside [{a}, {b}]"
        return value


@pytest.fixture
def scripted():
    """Factory: scripted(6, 1, 3) -> ScriptedRandom yielding those faces."""
    return lambda *faces: ScriptedRandom(faces)


@pytest.fixture
def roll_cache():
    return RollCache(default_ttl=60)


@pytest_asyncio.fixture
async def client(roll_cache):
    app.dependency_overrides[get_roll_cache] = lambda: roll_cache
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
