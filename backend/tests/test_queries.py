import pytest

from services.errors import PartNotFound
from services.ledger import MovementLedger
from services.parts import PartService
from services.queries import StockQueries


def test_low_stock_is_inclusive_of_minimum(db, make_part):
    make_part("A-1", stock=2, minimum=5)   # below
    make_part("A-2", stock=5, minimum=5)   # exactly at minimum
    make_part("A-3", stock=6, minimum=5)   # above
    make_part("A-4", stock=0, minimum=0)   # empty with no minimum still alerts

    refs = [p.reference for p in StockQueries(db).list_low_stock()]
    assert refs == ["A-1", "A-2", "A-4"]


def test_list_parts_search_matches_reference_name_and_category(db, make_part):
    make_part("ROUL-001", name="Roulement 6204", category="Bearings")
    make_part("COUR-002", name="Courroie trapézoïdale", category="Belts")
    make_part("FILT-003", name="Filtre à huile", category="Filters")

    queries = StockQueries(db)
    assert [p.reference for p in queries.list_parts()] == ["COUR-002", "FILT-003", "ROUL-001"]
    assert [p.reference for p in queries.list_parts(q="roul")] == ["ROUL-001"]
    assert [p.reference for p in queries.list_parts(q="huile")] == ["FILT-003"]
    assert [p.reference for p in queries.list_parts(q="belt")] == ["COUR-002"]
    assert [p.reference for p in queries.list_parts(category="Filters")] == ["FILT-003"]


def test_list_categories_is_distinct_and_sorted(db, make_part):
    make_part("A-1", category="Filters")
    make_part("A-2", category="Bearings")
    make_part("A-3", category="Filters")

    assert StockQueries(db).list_categories() == ["Bearings", "Filters"]


def test_get_part_missing_raises(db):
    with pytest.raises(PartNotFound):
        StockQueries(db).get_part("NOPE")


def test_movements_for_part_are_newest_first_and_filtered(db, make_part):
    make_part("A-1", stock=10)
    make_part("B-2", stock=10)
    ledger = MovementLedger(db)
    first = ledger.record_movement("A-1", "Outbound", 1, "Noa")
    other = ledger.record_movement("B-2", "Outbound", 1, "Noa")
    second = ledger.record_movement("A-1", "Inbound", 2, "Noa")
    third = ledger.record_movement("A-1", "Outbound", 3, "Noa")

    movements = StockQueries(db).list_movements_for_part("A-1")

    assert [m.id for m in movements] == [third, second, first]
    assert other not in [m.id for m in movements]
    stamps = [m.created_at for m in movements]
    assert stamps == sorted(stamps, reverse=True)


def test_list_movements_joins_part_name_and_keeps_orphans(db, make_part):
    make_part("A-1", stock=10, name="Bearing")
    make_part("B-2", stock=10, name="Belt")
    ledger = MovementLedger(db)
    older = ledger.record_movement("A-1", "Outbound", 1, "Noa")
    newer = ledger.record_movement("B-2", "Outbound", 1, "Noa")

    PartService(db).delete("A-1")

    rows = StockQueries(db).list_movements()
    assert [r["id"] for r in rows] == [newer, older]
    assert rows[0]["part_name"] == "Belt"
    assert rows[1]["part_name"] is None
    assert rows[1]["part_reference"] == "A-1"


def test_users_are_listed_alphabetically(db):
    names = [u.name for u in StockQueries(db).list_users()]
    assert names == sorted(names)
    assert "Farid" in names and "Monel" in names
