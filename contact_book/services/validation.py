"""
Field rules for the contact form.

The predicates are pure and are used twice: per keystroke, to decide whether a
proposed field value is committed, and on the whole form, to decide whether
the save action is enabled.
"""
import re
from typing import Callable, Dict

__all__ = [
    "is_valid_name", "is_numeric_or_empty", "is_valid_email", "is_save_enabled",
    "validation_errors", "accept_name_input", "accept_phone_input",
    "accept_email_input", "apply_keystroke",
]

NAME_PATTERN = re.compile(r"[A-Za-z]+")
NUMERIC_PATTERN = re.compile(r"[0-9]*")
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")
EMAIL_INPUT_PATTERN = re.compile(r"[a-z0-9._%+@-]+")


def is_valid_name(value: str) -> bool:
    """
    Check that a name is non-empty and made of ASCII letters only.

    :param value: Candidate first or last name.
    :return: True if every character is in A-Z or a-z.
    """
    return NAME_PATTERN.fullmatch(value) is not None


def is_numeric_or_empty(value: str) -> bool:
    """
    Check that a phone number contains ASCII digits only. The empty string passes.

    :param value: Candidate phone number.
    :return: True if every character is in 0-9.
    """
    return NUMERIC_PATTERN.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    """
    Check that an address has the ``local@domain.tld`` shape.

    :param value: Candidate email address.
    :return: True if the whole string matches the address pattern.
    """
    return EMAIL_PATTERN.fullmatch(value) is not None


def _is_blank(value: str) -> bool:
    return not value.strip()


def validation_errors(first_name: str, last_name: str, phone: str, email: str) -> Dict[str, str]:
    """
    Report which form fields currently block saving.

    Emptiness is judged on the trimmed value, the character rules on the value as typed.

    :return: Mapping of field name to ``"required"`` or ``"invalid"``; empty when the form can be saved.
    """
    errors: Dict[str, str] = {}
    checks = (
        ("first_name", first_name, is_valid_name),
        ("last_name", last_name, is_valid_name),
        ("phone", phone, is_numeric_or_empty),
        ("email", email, is_valid_email),
    )
    for field, value, predicate in checks:
        if _is_blank(value):
            errors[field] = "required"
        elif not predicate(value):
            errors[field] = "invalid"
    return errors


def is_save_enabled(first_name: str, last_name: str, phone: str, email: str) -> bool:
    """
    Decide whether the save action is available for the given form values.

    :return: True only if all four fields are present and pass their checks.
    """
    return not validation_errors(first_name, last_name, phone, email)


def accept_name_input(value: str) -> bool:
    return value == "" or is_valid_name(value)


def accept_phone_input(value: str) -> bool:
    return is_numeric_or_empty(value)


def accept_email_input(value: str) -> bool:
    # lowercase while typing; the full address shape is checked on save
    return value == "" or EMAIL_INPUT_PATTERN.fullmatch(value) is not None


KEYSTROKE_FILTERS: Dict[str, Callable[[str], bool]] = {
    "first_name": accept_name_input,
    "last_name": accept_name_input,
    "phone": accept_phone_input,
    "email": accept_email_input,
}


def apply_keystroke(field: str, current: str, proposed: str) -> str:
    """
    Commit a proposed field value if its field filter accepts it.

    A rejected edit leaves the field unchanged.

    :param field: One of ``first_name``, ``last_name``, ``phone``, ``email``.
    :param current: The value currently held by the field.
    :param proposed: The value the field would hold after the keystroke.
    :return: The value the field holds afterwards.
    :raises ValueError: If the field has no input filter.
    """
    try:
        accept = KEYSTROKE_FILTERS[field]
    except KeyError:
        raise ValueError(f"Unknown contact field: {field}")
    return proposed if accept(proposed) else current
