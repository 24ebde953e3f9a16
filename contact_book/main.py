import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_book.conf.config import settings
from contact_book.database.models import Contact
from contact_book.database.store import ContactStore
from contact_book.routes import contact

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_title,
    description="Single-screen contact book: add, search, sort and edit contacts.",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(contact.router)


def log_change(event: str, changed: Contact) -> None:
    logger.info(f"Contact {changed.id} {event}")


app.state.store = ContactStore()
app.state.store.subscribe(log_change)


@app.on_event("startup")
async def startup_event():
    """
        Startup event handler: configures logging from ``settings.log_level``.

        The store and its change logger are set up once at import and live in
        ``app.state`` for the lifetime of the process.
        """
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Starting up application...")
    logger.info(f"Contact store ready with {len(app.state.store)} contacts.")
    logger.info("Application startup complete.")


@app.get("/")
async def read_root():
    """
        Root endpoint for the Contact Book.

        Returns:
            dict: A welcome message.
        """
    return {"message": "Welcome to the Contact Book!"}
