from typing import List, Optional
from uuid import UUID

from contact_book.database.models import Contact
from contact_book.database.store import ContactStore
from contact_book.schemas.contact import ContactDraft, ContactForm
from contact_book.services import listing

__all__ = [
    "create_contact", "get_contact", "get_contacts", "update_contact",
    "search_contacts", "get_sections", "get_contact_form"
]


def create_contact(store: ContactStore, draft: ContactDraft) -> Contact:
    """
    Save a new contact in the store.

    :param store: The contact store.
    :param draft: ContactDraft with contact data, already validated.
    :return: The created contact object.
    """
    return store.add(draft)


def get_contact(store: ContactStore, contact_id: UUID) -> Optional[Contact]:
    """
    Retrieve a contact by its ID.

    :param store: The contact store.
    :param contact_id: ID of the contact to retrieve.
    :return: Contact object if found, otherwise None.
    """
    return store.get(contact_id)


def get_contacts(store: ContactStore, ascending: bool = True) -> List[Contact]:
    """
    Retrieve every contact ordered by first name.

    :param store: The contact store.
    :param ascending: Sort direction.
    :return: List of contact objects.
    """
    return listing.sort_contacts(store.list(), ascending)


def update_contact(store: ContactStore, contact_id: UUID, draft: ContactDraft) -> Optional[Contact]:
    """
    Update a contact with new data.

    :param store: The contact store.
    :param contact_id: ID of the contact to update.
    :param draft: ContactDraft with the edited values, already validated.
    :return: The updated contact object, or None if not found.
    """
    return store.update(contact_id, draft)


def search_contacts(store: ContactStore, query: str, ascending: bool = True) -> List[Contact]:
    """
    Search for contacts by first name or last name.

    :param store: The contact store.
    :param query: Search query string.
    :param ascending: Sort direction.
    :return: List of matching contact objects.
    """
    return listing.query_contacts(store.list(), query, ascending)


def get_sections(store: ContactStore, query: str = "", ascending: bool = True) -> List[listing.Section]:
    """
    Retrieve matching contacts grouped into sections by initial.

    :param store: The contact store.
    :param query: Search query string.
    :param ascending: Sort direction.
    :return: List of sections in display order.
    """
    return listing.list_sections(store.list(), query, ascending)


def get_contact_form(contact: Contact) -> ContactForm:
    """
    Build the edit form pre-filled with a contact's values.

    :param contact: The contact being edited.
    :return: Form values for the edit screen.
    """
    return ContactForm(
        first_name=contact.first_name,
        last_name=contact.last_name,
        phone=contact.phone,
        email=contact.email,
        birthday=contact.birthday,
        has_custom_image=not contact.profile_image.is_placeholder,
    )
