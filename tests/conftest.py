"""
Test infrastructure for the Articles API.

Strategy
--------
- SQLite in-memory via aiosqlite, so no Postgres instance is needed.
- StaticPool makes every session share the one in-memory connection;
  SQLite in-memory databases are connection-scoped.
- The app's get_db dependency is overridden with the test session factory.
- Tables are created before each test and dropped after it.
- Redis is disabled by setting cache._redis = None; CacheManager treats that
  as a permanent miss.
- S3 is replaced by the in-memory fakes below, injected through the provider
  constructors or FastAPI dependency overrides.
"""
import json
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from botocore.exceptions import ClientError
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from articles_api.cache import cache
from articles_api.database import Base, get_db
from articles_api.main import app
from articles_api.middleware import install_query_counter

# ---------------------------------------------------------------------------
# Test database engine
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# S3 and cache fakes
# ---------------------------------------------------------------------------

def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakeBody:
    def __init__(self, data: bytes) -> None:
        self._data = data

    async def read(self) -> bytes:
        return self._data


class FakePaginator:
    def __init__(self, objects: dict, page_size: int = 2) -> None:
        self._objects = objects
        self._page_size = page_size

    async def paginate(self, Bucket: str, Prefix: str = ""):
        keys = sorted(k for k in self._objects if k.startswith(Prefix))
        for start in range(0, max(len(keys), 1), self._page_size):
            chunk = keys[start:start + self._page_size]
            yield {"Contents": [{"Key": k} for k in chunk]} if chunk else {}


class FakeS3Client:
    """The handful of S3 client calls the providers make, backed by a dict."""

    def __init__(self, bucket: str) -> None:
        self.bucket = bucket
        self.objects: dict[str, bytes] = {}
        self.get_calls = 0
        self.fail_with: Exception | None = None

    def _check(self, bucket: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        if bucket != self.bucket:
            raise _client_error("NoSuchBucket", "GetObject")

    async def get_object(self, Bucket: str, Key: str):
        self.get_calls += 1
        self._check(Bucket)
        if Key not in self.objects:
            raise _client_error("NoSuchKey", "GetObject")
        return {"Body": FakeBody(self.objects[Key])}

    async def put_object(self, Bucket: str, Key: str, Body: bytes, **kwargs):
        self._check(Bucket)
        self.objects[Key] = Body
        return {}

    async def delete_object(self, Bucket: str, Key: str):
        self._check(Bucket)
        self.objects.pop(Key, None)
        return {}

    def get_paginator(self, name: str) -> FakePaginator:
        assert name == "list_objects_v2"
        self._check(self.bucket)
        return FakePaginator(self.objects)


class FakeS3ClientFactory:
    def __init__(self, bucket_name: str = "test-bucket") -> None:
        self.bucket_name = bucket_name
        self.s3 = FakeS3Client(bucket_name)

    @property
    def configured(self) -> bool:
        return bool(self.bucket_name)

    @asynccontextmanager
    async def client(self):
        yield self.s3

    def put_json(self, key: str, document) -> None:
        self.s3.objects[key] = json.dumps(document).encode()


class FakeCache:
    """Dict-backed stand-in for CacheManager (TTL recorded, never enforced)."""

    def __init__(self) -> None:
        self.store: dict = {}
        self.ttls: dict = {}

    async def get(self, key: str):
        value = self.store.get(key)
        # Round-trip through JSON like the Redis-backed cache does.
        return json.loads(json.dumps(value)) if value is not None else None

    async def set(self, key: str, value, ttl: int | None = None) -> None:
        self.store[key] = value
        self.ttls[key] = ttl


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """A live AsyncSession for tests that call repositories or services directly."""
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """httpx.AsyncClient wired to the app via ASGITransport, with Redis disabled."""
    cache._redis = None
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def s3_factory() -> FakeS3ClientFactory:
    return FakeS3ClientFactory()


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
def override_dependency():
    """Install FastAPI dependency overrides for one test and remove them afterwards."""
    installed = []

    def _override(dependency, provider):
        app.dependency_overrides[dependency] = provider
        installed.append(dependency)

    yield _override
    for dependency in installed:
        app.dependency_overrides.pop(dependency, None)
