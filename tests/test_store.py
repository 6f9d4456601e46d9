# tests/test_store.py
import uuid

from ticketgate.ticket import store


def test_insert_and_get(db):
    tid = store.insert_ticket(db, "111", "Ana", "Horvat")
    ticket = store.get_ticket(db, tid)
    assert ticket is not None
    assert ticket.tax_id == "111"
    assert ticket.first_name == "Ana"
    assert ticket.last_name == "Horvat"
    assert ticket.created_at is not None


def test_get_missing_returns_none(db):
    assert store.get_ticket(db, uuid.uuid4()) is None


def test_counts(db):
    assert store.total_count(db) == 0
    store.insert_ticket(db, "111", "A", "B")
    store.insert_ticket(db, "111", "C", "D")
    store.insert_ticket(db, "222", "E", "F")
    assert store.count_by_tax_id(db, "111") == 2
    assert store.count_by_tax_id(db, "222") == 1
    assert store.count_by_tax_id(db, "333") == 0
    assert store.total_count(db) == 3


def test_insert_under_cap_stops_at_cap(db):
    ids = [store.insert_ticket_under_cap(db, "12345", "Ana", "Horvat", cap=3) for _ in range(3)]
    assert all(ids)
    assert len(set(ids)) == 3

    assert store.insert_ticket_under_cap(db, "12345", "Ana", "Horvat", cap=3) is None
    assert store.count_by_tax_id(db, "12345") == 3


def test_insert_under_cap_respects_existing_rows(db):
    store.insert_ticket(db, "777", "A", "B")
    store.insert_ticket(db, "777", "A", "B")
    assert store.insert_ticket_under_cap(db, "777", "A", "B", cap=2) is None
    assert store.insert_ticket_under_cap(db, "778", "A", "B", cap=2) is not None


def test_conditional_insert_row_is_readable(db):
    tid = store.insert_ticket_under_cap(db, "42", "Ivo", "Kos", cap=3)
    ticket = store.get_ticket(db, tid)
    assert ticket.tax_id == "42"
    assert ticket.created_at is not None
