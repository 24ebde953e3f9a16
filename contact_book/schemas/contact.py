from datetime import date, datetime
from typing import Dict, List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel

from contact_book.database.models import ProfileImage


class ContactFields(BaseModel):
    """
    Text fields of the contact form.

    Attributes:
        first_name (str): The first name of the contact.
        last_name (str): The last name of the contact.
        phone (str): The phone number of the contact.
        email (str): The email address of the contact.
    """
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    email: str = ""


class ContactDraft(ContactFields):
    """
    User-entered values for a contact that has not been saved yet.

    Attributes:
        birthday (Optional[date]): Date of birth; the current date is used when unset.
        profile_image (Optional[ProfileImage]): Chosen image; the placeholder is used when unset.
    """
    birthday: Optional[date] = None
    profile_image: Optional[ProfileImage] = None


class ContactForm(ContactFields):
    """
    Form values pre-filled from an existing contact, used by the edit screen.
    """
    birthday: date
    has_custom_image: bool


class ContactResponse(BaseModel):
    """
    Schema for returning contact data in responses.

    Attributes:
        id (UUID): Unique identifier for the contact.
        image_url (str): Path of the endpoint serving the profile image.
    """
    id: UUID
    first_name: str
    last_name: str
    phone: str
    email: str
    birthday: date
    created_at: datetime
    has_custom_image: bool
    image_url: str


class ContactSection(BaseModel):
    """
    A run of contacts sharing the same initial, in display order.
    """
    initial: str
    contacts: List[ContactResponse]


class SaveCheck(BaseModel):
    save_enabled: bool
    errors: Dict[str, str]


class Keystroke(BaseModel):
    field: Literal["first_name", "last_name", "phone", "email"]
    current: str = ""
    proposed: str


class KeystrokeResult(BaseModel):
    value: str
    accepted: bool
