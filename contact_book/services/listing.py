"""
Derived views of the contact list: search, ordering and sections by initial.

None of these functions modify their input; the store keeps insertion order
and every display order is computed from it.
"""
from itertools import groupby
from typing import Iterable, List, NamedTuple

from contact_book.database.models import Contact

__all__ = [
    "Section", "filter_contacts", "sort_contacts", "group_key",
    "group_by_initial", "query_contacts", "list_sections",
]


class Section(NamedTuple):
    initial: str
    contacts: List[Contact]


def filter_contacts(contacts: Iterable[Contact], search_text: str = "") -> List[Contact]:
    """
    Keep contacts whose first or last name contains the search text, ignoring case.

    :param contacts: Contacts in their current order.
    :param search_text: Text typed in the search bar; empty keeps everything.
    :return: Matching contacts, order preserved.
    """
    if not search_text:
        return list(contacts)
    needle = search_text.casefold()
    return [
        contact for contact in contacts
        if needle in contact.first_name.casefold() or needle in contact.last_name.casefold()
    ]


def sort_contacts(contacts: Iterable[Contact], ascending: bool = True) -> List[Contact]:
    """
    Order contacts by first name.

    Equal first names keep their relative order in both directions.
    """
    return sorted(contacts, key=lambda contact: contact.first_name, reverse=not ascending)


def group_key(contact: Contact) -> str:
    return contact.first_name[:1].upper()


def group_by_initial(contacts: Iterable[Contact]) -> List[Section]:
    """
    Split an already ordered sequence into sections of consecutive contacts with the same initial.

    :param contacts: Contacts in display order.
    :return: One section per run of equal initials.
    """
    return [Section(initial, list(run)) for initial, run in groupby(contacts, key=group_key)]


def query_contacts(contacts: Iterable[Contact], search_text: str = "", ascending: bool = True) -> List[Contact]:
    return sort_contacts(filter_contacts(contacts, search_text), ascending)


def list_sections(contacts: Iterable[Contact], search_text: str = "", ascending: bool = True) -> List[Section]:
    return group_by_initial(query_contacts(contacts, search_text, ascending))
