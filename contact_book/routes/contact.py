import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status

from contact_book.conf.config import settings
from contact_book.database.models import Contact
from contact_book.database.store import ContactStore, get_store
from contact_book.repository import contacts as repository_contacts
from contact_book.schemas.contact import (
    ContactDraft, ContactFields, ContactForm, ContactResponse, ContactSection,
    Keystroke, KeystrokeResult, SaveCheck,
)
from contact_book.services.images import ImageError, read_image
from contact_book.services.validation import apply_keystroke, validation_errors

router = APIRouter(prefix="/contacts", tags=["contacts"])

logger = logging.getLogger(__name__)


def to_response(contact: Contact) -> ContactResponse:
    return ContactResponse(
        id=contact.id,
        first_name=contact.first_name,
        last_name=contact.last_name,
        phone=contact.phone,
        email=contact.email,
        birthday=contact.birthday,
        created_at=contact.created_at,
        has_custom_image=not contact.profile_image.is_placeholder,
        image_url=f"{router.prefix}/{contact.id}/image",
    )


async def draft_from_form(
    first_name: str = Form(""),
    last_name: str = Form(""),
    phone: str = Form(""),
    email: str = Form(""),
    birthday: Optional[date] = Form(None),
    file: Optional[UploadFile] = File(None),
) -> ContactDraft:
    """
    Build a draft from the submitted contact form, refusing it while save is disabled.

    :raises HTTPException: 422 with per-field errors if the form cannot be saved,
        400 if the uploaded image is unusable.
    """
    errors = validation_errors(first_name, last_name, phone, email)
    if errors:
        logger.info(f"Contact form rejected: {errors}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Contact cannot be saved", "errors": errors},
        )

    try:
        profile_image = await read_image(file)
    except ImageError as e:
        logger.warning(f"Profile image rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ContactDraft(
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        email=email,
        birthday=birthday,
        profile_image=profile_image,
    )


async def get_existing_contact(contact_id: UUID, store: ContactStore = Depends(get_store)) -> Contact:
    contact = repository_contacts.get_contact(store, contact_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return contact


@router.get("/", response_model=List[ContactResponse])
async def get_contacts(search: str = "", ascending: bool = settings.default_ascending, store: ContactStore = Depends(get_store)):
    """
    List contacts, optionally filtered by name, sorted by first name.

    :param search: Text matched against first and last name, ignoring case.
    :param ascending: Sort direction.
    :param store: Contact store.
    :return: List of contact objects.
    """
    if not search:
        contacts = repository_contacts.get_contacts(store, ascending)
    else:
        contacts = repository_contacts.search_contacts(store, search, ascending)
    return [to_response(contact) for contact in contacts]


@router.get("/sections", response_model=List[ContactSection])
async def get_sections(search: str = "", ascending: bool = settings.default_ascending, store: ContactStore = Depends(get_store)):
    """
    List contacts grouped into one section per initial.

    :param search: Text matched against first and last name, ignoring case.
    :param ascending: Sort direction.
    :param store: Contact store.
    :return: Sections in display order.
    """
    sections = repository_contacts.get_sections(store, search, ascending)
    return [
        ContactSection(initial=section.initial, contacts=[to_response(c) for c in section.contacts])
        for section in sections
    ]


@router.post("/", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(draft: ContactDraft = Depends(draft_from_form), store: ContactStore = Depends(get_store)):
    """
    Save a new contact from the contact form.

    :param draft: Validated form values.
    :param store: Contact store.
    :return: The newly created contact.
    """
    contact = repository_contacts.create_contact(store, draft)
    return to_response(contact)


@router.post("/validate", response_model=SaveCheck)
async def check_save(fields: ContactFields):
    """
    Report whether the form can be saved and which fields block it.
    """
    errors = validation_errors(fields.first_name, fields.last_name, fields.phone, fields.email)
    return SaveCheck(save_enabled=not errors, errors=errors)


@router.post("/keystroke", response_model=KeystrokeResult)
async def filter_keystroke(keystroke: Keystroke):
    """
    Apply a keystroke to a form field, keeping the previous value if the new one is not allowed.
    """
    value = apply_keystroke(keystroke.field, keystroke.current, keystroke.proposed)
    return KeystrokeResult(value=value, accepted=value == keystroke.proposed)


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact_by_id(contact: Contact = Depends(get_existing_contact)):
    """
    Retrieve a specific contact by ID.

    :param contact: Contact resolved from the path ID.
    :return: Contact object if found.
    """
    return to_response(contact)


@router.get("/{contact_id}/form", response_model=ContactForm)
async def get_contact_form(contact: Contact = Depends(get_existing_contact)):
    """
    Get the edit form pre-filled with a contact's values.
    """
    return repository_contacts.get_contact_form(contact)


@router.get("/{contact_id}/image")
async def get_contact_image(contact: Contact = Depends(get_existing_contact)):
    """
    Return the contact's profile image, or the placeholder if none was chosen.
    """
    image = contact.profile_image
    return Response(content=image.data, media_type=image.content_type)


@router.put("/{contact_id}", response_model=ContactResponse)
async def update_contact(existing: Contact = Depends(get_existing_contact), draft: ContactDraft = Depends(draft_from_form), store: ContactStore = Depends(get_store)):
    """
    Update an existing contact by ID.

    The contact is resolved before the form is checked, so an unknown ID is a 404.

    :param existing: Contact resolved from the path ID.
    :param draft: Validated form values.
    :param store: Contact store.
    :return: Updated contact object.
    """
    contact = repository_contacts.update_contact(store, existing.id, draft)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return to_response(contact)
