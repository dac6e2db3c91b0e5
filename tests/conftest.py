"""
Pytest fixtures: an app wired to in-memory doubles and an HTTP client bound to it
"""

import httpx
import pytest
import pytest_asyncio

from app import create_app
from mocks import FakePool, InMemoryColaboradoresService


@pytest.fixture
def colaboradores_service():
    return InMemoryColaboradoresService()


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest.fixture
def app(fake_pool, colaboradores_service):
    return create_app(pool=fake_pool, service=colaboradores_service)


@pytest_asyncio.fixture
async def http_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def ana():
    return {"nome": "Ana", "cargo": "Dev", "salario": 5000, "data_admissao": "2024-01-01"}
