import pytest

from contact_book.services.listing import (
    filter_contacts, group_by_initial, group_key, list_sections, query_contacts, sort_contacts,
)


@pytest.fixture
def add(store, make_draft):
    def _add(first_name, last_name="Doe"):
        return store.add(make_draft(first_name=first_name, last_name=last_name))
    return _add


def first_names(contacts):
    return [contact.first_name for contact in contacts]


def test_filter_matches_either_name_ignoring_case(store, add):
    ann_lee = add("Ann", "Lee")
    bob_ann = add("Bob", "Ann")
    add("Carl", "Smith")

    assert filter_contacts(store.list(), "ann") == [ann_lee, bob_ann]
    assert filter_contacts(store.list(), "LEE") == [ann_lee]


def test_filter_with_empty_text_keeps_everything(store, add):
    add("Ann")
    add("Bob")
    assert filter_contacts(store.list(), "") == list(store.list())


def test_filter_matches_substring(store, add):
    add("Christina")
    add("Tina")
    add("Bob")
    assert first_names(filter_contacts(store.list(), "tin")) == ["Christina", "Tina"]


def test_sort_ascending_and_descending(store, add):
    for name in ["Charlie", "Alice", "Bob"]:
        add(name)
    assert first_names(sort_contacts(store.list())) == ["Alice", "Bob", "Charlie"]
    assert first_names(sort_contacts(store.list(), ascending=False)) == ["Charlie", "Bob", "Alice"]


def test_sort_uses_code_point_order(store, add):
    for name in ["bob", "Bob", "alice"]:
        add(name)
    assert first_names(sort_contacts(store.list())) == ["Bob", "alice", "bob"]


def test_sort_is_stable_on_ties(store, add):
    first = add("Sam", "Jones")
    second = add("Sam", "Adams")
    add("Ann")
    assert sort_contacts(store.list())[1:] == [first, second]
    assert sort_contacts(store.list(), ascending=False)[:2] == [first, second]


def test_sort_does_not_touch_store_order(store, add):
    for name in ["Charlie", "Alice"]:
        add(name)
    sort_contacts(store.list())
    assert first_names(store.list()) == ["Charlie", "Alice"]


def test_group_key(store, add):
    assert group_key(add("alice")) == "A"
    assert group_key(add("Bob")) == "B"


def test_group_by_initial(store, add):
    for name in ["Alice", "Amy", "Bob"]:
        add(name)
    sections = group_by_initial(sort_contacts(store.list()))

    assert [section.initial for section in sections] == ["A", "B"]
    assert first_names(sections[0].contacts) == ["Alice", "Amy"]
    assert first_names(sections[1].contacts) == ["Bob"]


def test_group_by_initial_on_empty_list():
    assert group_by_initial([]) == []


def test_query_filters_then_sorts(store, add):
    for name, last in [("Zed", "Ann"), ("Anna", "Z"), ("Bob", "B")]:
        add(name, last)
    assert first_names(query_contacts(store.list(), "ann")) == ["Anna", "Zed"]
    assert first_names(query_contacts(store.list(), "ann", ascending=False)) == ["Zed", "Anna"]


def test_list_sections_descending(store, add):
    for name in ["Alice", "Bob", "Amy", "Brian"]:
        add(name)
    sections = list_sections(store.list(), ascending=False)
    assert [(s.initial, first_names(s.contacts)) for s in sections] == [
        ("B", ["Brian", "Bob"]),
        ("A", ["Amy", "Alice"]),
    ]
