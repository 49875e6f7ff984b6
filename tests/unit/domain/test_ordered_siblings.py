from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from breedersroom.domain.ordered_siblings import (
    DuplicateSibling,
    OrderedSiblings,
    OrderViolation,
    OutsideWindow,
    Sibling,
)

MATED_ON = date(2024, 1, 1)


def make_sequence(*dates: date) -> tuple[OrderedSiblings, list[Sibling]]:
    siblings = [Sibling(id=uuid4(), order=i, on=d) for i, d in enumerate(dates, start=1)]
    return OrderedSiblings(uuid4(), siblings, floor=MATED_ON), siblings


def test_next_order_starts_at_one():
    sequence, _ = make_sequence()
    assert sequence.max_order == 0
    assert sequence.next_order == 1


def test_insert_appends_after_last_sibling():
    sequence, siblings = make_sequence(date(2024, 1, 10), date(2024, 1, 20))
    window = sequence.check_insert(3, date(2024, 1, 30))
    assert window.previous == siblings[1]
    assert window.next is None


def test_insert_rejects_duplicate_order():
    sequence, _ = make_sequence(date(2024, 1, 10))
    with pytest.raises(DuplicateSibling):
        sequence.check_insert(1, date(2024, 1, 20))


def test_insert_rejects_duplicate_date():
    sequence, _ = make_sequence(date(2024, 1, 10))
    with pytest.raises(DuplicateSibling):
        sequence.check_insert(2, date(2024, 1, 10))


def test_insert_rejects_order_below_next():
    sequence, _ = make_sequence(date(2024, 1, 10), date(2024, 1, 20), date(2024, 1, 30))
    sequence.siblings.pop(1)  # gap at order 2
    with pytest.raises(OrderViolation, match="clutch order must exceed 3"):
        sequence.check_insert(2, date(2024, 1, 15))


def test_insert_rejects_date_before_floor():
    sequence, _ = make_sequence()
    with pytest.raises(OrderViolation, match="precedes"):
        sequence.check_insert(1, date(2023, 12, 31))


def test_insert_accepts_date_on_floor():
    sequence, _ = make_sequence()
    sequence.check_insert(1, MATED_ON)


def test_insert_rejects_date_not_after_previous():
    sequence, _ = make_sequence(date(2024, 1, 10), date(2024, 1, 20))
    with pytest.raises(OrderViolation):
        sequence.check_insert(3, date(2024, 1, 15))


def test_move_inside_open_window():
    sequence, siblings = make_sequence(date(2024, 1, 10), date(2024, 1, 20), date(2024, 1, 30))
    window = sequence.check_move(siblings[1].id, date(2024, 1, 25))
    assert window.previous == siblings[0]
    assert window.next == siblings[2]


@pytest.mark.parametrize("new_date", [date(2024, 1, 10), date(2024, 1, 30), date(2024, 2, 5)])
def test_move_outside_window_is_rejected(new_date):
    sequence, siblings = make_sequence(date(2024, 1, 10), date(2024, 1, 20), date(2024, 1, 30))
    with pytest.raises(OutsideWindow):
        sequence.check_move(siblings[1].id, new_date)


def test_move_to_same_date_is_rejected():
    sequence, siblings = make_sequence(date(2024, 1, 10))
    with pytest.raises(OrderViolation):
        sequence.check_move(siblings[0].id, date(2024, 1, 10))


def test_move_before_floor_is_rejected():
    sequence, siblings = make_sequence(date(2024, 1, 10))
    with pytest.raises(OrderViolation):
        sequence.check_move(siblings[0].id, date(2023, 12, 1))


def test_from_records_reads_named_fields():
    class Row:
        def __init__(self, order: int, laid_on: date) -> None:
            self.id = uuid4()
            self.clutch_order = order
            self.laid_on = laid_on

    rows = [Row(2, date(2024, 2, 1)), Row(1, date(2024, 1, 1))]
    sequence = OrderedSiblings.from_records(
        uuid4(), rows, order_field="clutch_order", date_field="laid_on"
    )
    assert [s.order for s in sequence.siblings] == [1, 2]
    assert sequence.next_order == 3
