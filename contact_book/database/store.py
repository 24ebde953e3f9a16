import logging
from datetime import datetime
from typing import Callable, Dict, Iterator, List, Optional, Tuple
from uuid import UUID, uuid4

from fastapi import Request

from contact_book.database.models import Contact
from contact_book.schemas.contact import ContactDraft
from contact_book.services.images import placeholder_image

logger = logging.getLogger(__name__)

Listener = Callable[[str, Contact], None]


def local_now() -> datetime:
    return datetime.now().astimezone()


class ContactStore:
    """
    Ordered in-memory collection of contacts, held for the lifetime of the process.

    The store is the only place contacts are created or replaced. It does not
    validate drafts; callers gate saving with ``services.validation`` first.

    :param clock: Source of the current local moment; its own date is the default birthday.
    :param id_factory: Source of fresh contact identifiers.
    """

    def __init__(self, clock: Callable[[], datetime] = local_now, id_factory: Callable[[], UUID] = uuid4):
        self._clock = clock
        self._id_factory = id_factory
        self._contacts: List[Contact] = []
        self._index: Dict[UUID, int] = {}
        self._listeners: List[Listener] = []

    def add(self, draft: ContactDraft) -> Contact:
        """
        Create a contact from a draft and append it to the collection.

        :param draft: Field values for the new contact.
        :return: The created contact.
        """
        now = self._clock()
        contact_id = self._id_factory()
        while contact_id in self._index:
            contact_id = self._id_factory()

        contact = Contact(
            id=contact_id,
            first_name=draft.first_name,
            last_name=draft.last_name,
            phone=draft.phone,
            email=draft.email,
            birthday=draft.birthday or now.date(),
            profile_image=draft.profile_image or placeholder_image(),
            created_at=now,
        )
        self._contacts.append(contact)
        self._index[contact.id] = len(self._contacts) - 1
        logger.debug("Contact %s added", contact.id)
        self._notify("added", contact)
        return contact

    def list(self) -> Tuple[Contact, ...]:
        """
        Return the contacts in insertion order.

        The result is a snapshot; later changes to the store do not affect it.
        """
        return tuple(self._contacts)

    def get(self, contact_id: UUID) -> Optional[Contact]:
        position = self._index.get(contact_id)
        if position is None:
            return None
        return self._contacts[position]

    def update(self, contact_id: UUID, draft: ContactDraft) -> Optional[Contact]:
        """
        Replace the fields of an existing contact, keeping its identifier and position.

        An unset birthday or image in the draft keeps the stored value.

        :param contact_id: Identifier of the contact to edit.
        :param draft: New field values.
        :return: The updated contact, or None if no contact has that identifier.
        """
        position = self._index.get(contact_id)
        if position is None:
            return None

        current = self._contacts[position]
        contact = current.model_copy(update={
            "first_name": draft.first_name,
            "last_name": draft.last_name,
            "phone": draft.phone,
            "email": draft.email,
            "birthday": draft.birthday or current.birthday,
            "profile_image": draft.profile_image or current.profile_image,
        })
        self._contacts[position] = contact
        logger.debug("Contact %s updated", contact.id)
        self._notify("updated", contact)
        return contact

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every add or update.

        :param listener: Called with the event name (``"added"`` or ``"updated"``) and the contact.
        :return: A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: str, contact: Contact) -> None:
        for listener in list(self._listeners):
            listener(event, contact)

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.list())

    def __contains__(self, contact_id: object) -> bool:
        return contact_id in self._index


async def get_store(request: Request) -> ContactStore:
    """
    Dependency returning the application's contact store.
    This will be overridden in testing environments.
    """
    return request.app.state.store
