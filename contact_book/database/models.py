from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ProfileImage(BaseModel):
    """
    Image payload attached to a contact.

    Attributes:
        data (bytes): Raw image bytes.
        content_type (str): MIME type of the payload.
        is_placeholder (bool): True when no image was chosen and the default silhouette is used.
    """
    model_config = ConfigDict(frozen=True)

    data: bytes
    content_type: str
    is_placeholder: bool = False


class Contact(BaseModel):
    """
    A saved contact. Instances are immutable; an edit produces a new
    instance carrying the same ``id``.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    first_name: str
    last_name: str
    phone: str
    email: str
    birthday: date
    profile_image: ProfileImage
    created_at: datetime
