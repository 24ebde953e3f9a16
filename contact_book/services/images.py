from typing import Optional

from fastapi import UploadFile

from contact_book.conf.config import settings
from contact_book.database.models import ProfileImage

PLACEHOLDER_SVG = (
    b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    b'<circle cx="12" cy="8" r="4"/>'
    b'<path d="M4 21c0-4.4 3.6-8 8-8s8 3.6 8 8z"/>'
    b'</svg>'
)

_PLACEHOLDER = ProfileImage(data=PLACEHOLDER_SVG, content_type="image/svg+xml", is_placeholder=True)


class ImageError(Exception):
    """Raised when an uploaded file cannot be used as a profile image."""


def placeholder_image() -> ProfileImage:
    """
    Return the default "person" silhouette used when no image was chosen.
    """
    return _PLACEHOLDER


async def read_image(file: Optional[UploadFile]) -> Optional[ProfileImage]:
    """
    Read a picked profile image from an upload.

    A missing or empty upload means the user cancelled the picker.

    Args:
        file: The uploaded file, or None when nothing was sent.

    Returns:
        ProfileImage | None: The image payload, or None if the pick was cancelled.

    Raises:
        ImageError: If the upload is not an image or exceeds ``settings.max_image_bytes``.
    """
    if file is None or not file.filename:
        return None

    data = await file.read(settings.max_image_bytes + 1)
    if not data:
        return None

    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise ImageError(f"Unsupported content type: {content_type or 'unknown'}")
    if len(data) > settings.max_image_bytes:
        raise ImageError(f"Image is larger than {settings.max_image_bytes} bytes")

    return ProfileImage(data=data, content_type=content_type)
