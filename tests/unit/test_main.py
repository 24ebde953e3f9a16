import pytest
from httpx import AsyncClient, ASGITransport
from unittest.mock import patch

from contact_book.main import app, startup_event, log_change
from contact_book.database.store import ContactStore


@pytest.mark.asyncio
async def test_read_root():
    """
    Tests the root endpoint of the FastAPI application.
    Ensures it returns a 200 OK status and the expected welcome message.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to the Contact Book!"}


def test_app_owns_a_store():
    assert isinstance(app.state.store, ContactStore)


@pytest.mark.asyncio
@patch("contact_book.main.logging.basicConfig")
@patch("contact_book.main.settings")
async def test_startup_event(mock_settings, mock_basic_config, make_draft, caplog):
    """
    Tests the startup event handler.
    Verifies logging is configured and repeated startups log each store change once.
    """
    mock_settings.log_level = "debug"

    for _ in range(3):
        await startup_event()

    mock_basic_config.assert_called_with(level="DEBUG")
    assert mock_basic_config.call_count == 3

    with caplog.at_level("INFO", logger="contact_book.main"):
        contact = app.state.store.add(make_draft())
    messages = [record.getMessage() for record in caplog.records]
    assert messages.count(f"Contact {contact.id} added") == 1


def test_log_change(make_draft, caplog):
    contact = ContactStore().add(make_draft())
    with caplog.at_level("INFO", logger="contact_book.main"):
        log_change("updated", contact)
    assert f"Contact {contact.id} updated" in caplog.text
