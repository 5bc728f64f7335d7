"""Shared test fixtures.

The app is built with in-memory repositories and injected services, so
no MongoDB is needed and the lifespan does not have to run for the
GraphQL endpoint to work under ``ASGITransport``.
"""

from typing import AsyncIterator

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tasklists.app import Services, build_services, create_app
from tasklists.domain.user.entities import User
from tasklists.infrastructure.config import Settings
from tasklists.infrastructure.persistence.factory import Repositories, create_repositories

TEST_SECRET = "test-secret"


@pytest.fixture
def settings() -> Settings:
    """In-memory settings with the cheapest bcrypt work factor."""
    return Settings(
        jwt_secret=TEST_SECRET,
        repository_backend="inmemory",
        bcrypt_rounds=4,
    )


@pytest.fixture
def repositories(settings: Settings) -> Repositories:
    return create_repositories(settings)


@pytest.fixture
def services(settings: Settings, repositories: Repositories) -> Services:
    return build_services(settings, repositories)


@pytest.fixture
def app(services: Services) -> FastAPI:
    return create_app(services=services)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the app through ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def make_user():
    """Factory for User entities with valid ObjectId identifiers."""

    def _make(name: str = "Ada", email: str = "ada@example.com") -> User:
        return User(
            id=str(ObjectId()),
            name=name,
            email=email,
            password_hash="$2b$04$notarealhash",
        )

    return _make
