import pytest
import pytest_asyncio
from datetime import datetime, timezone
from httpx import AsyncClient, ASGITransport

from contact_book.main import app
from contact_book.database.store import ContactStore, get_store
from contact_book.schemas.contact import ContactDraft

FIXED_NOW = datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def store() -> ContactStore:
    return ContactStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def make_draft():
    def _make_draft(first_name="John", last_name="Doe", phone="5551234", email="john@doe.com", **extra):
        return ContactDraft(first_name=first_name, last_name=last_name, phone=phone, email=email, **extra)
    return _make_draft


@pytest_asyncio.fixture
async def test_client(store: ContactStore):
    async def override_get_store():
        return store

    app.dependency_overrides[get_store] = override_get_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        try:
            yield client
        finally:
            app.dependency_overrides.pop(get_store, None)
