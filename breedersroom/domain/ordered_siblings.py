"""Ordered sibling sequences.

Children of one parent record (clutches of a mating) form a sequence keyed by
an integer order; their dates must increase strictly with that order. Creation
and date edits both go through :class:`OrderedSiblings` so the rule is checked
the same way on every write.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable
from uuid import UUID


class SiblingOrderError(ValueError):
    label = "item"


class DuplicateSibling(SiblingOrderError):
    """Order or date already taken by a sibling."""


class OrderViolation(SiblingOrderError):
    """Order or date breaks the monotonic sequence on insert."""


class OutsideWindow(SiblingOrderError):
    """A moved date leaves the open interval between its neighbours."""


@dataclass(frozen=True, slots=True)
class Sibling:
    id: UUID
    order: int
    on: date


@dataclass(frozen=True, slots=True)
class Window:
    previous: Sibling | None
    next: Sibling | None

    def contains(self, on: date) -> bool:
        if self.previous is not None and on <= self.previous.on:
            return False
        if self.next is not None and on >= self.next.on:
            return False
        return True

    def describe(self) -> str:
        low = self.previous.on.isoformat() if self.previous else "-inf"
        high = self.next.on.isoformat() if self.next else "+inf"
        return f"({low}, {high})"


class OrderedSiblings:
    def __init__(
        self,
        parent_id: UUID | None,
        siblings: Iterable[Sibling],
        *,
        floor: date | None = None,
        label: str = "clutch",
    ) -> None:
        self.parent_id = parent_id
        self.siblings = sorted(siblings, key=lambda s: s.order)
        self.floor = floor
        self.label = label

    @classmethod
    def from_records(
        cls,
        parent_id: UUID | None,
        records: Iterable[Any],
        *,
        order_field: str,
        date_field: str,
        floor: date | None = None,
        label: str = "clutch",
    ) -> OrderedSiblings:
        siblings = [
            Sibling(id=r.id, order=getattr(r, order_field), on=getattr(r, date_field))
            for r in records
        ]
        return cls(parent_id, siblings, floor=floor, label=label)

    @property
    def max_order(self) -> int:
        return self.siblings[-1].order if self.siblings else 0

    @property
    def next_order(self) -> int:
        return self.max_order + 1

    def window_for(self, order: int, *, exclude: UUID | None = None) -> Window:
        previous = None
        following = None
        for sibling in self.siblings:
            if sibling.id == exclude:
                continue
            if sibling.order < order:
                previous = sibling
            elif sibling.order > order and following is None:
                following = sibling
        return Window(previous=previous, next=following)

    def check_insert(self, order: int, on: date) -> Window:
        """Validate appending a sibling with ``order`` dated ``on``."""
        for sibling in self.siblings:
            if sibling.order == order:
                raise DuplicateSibling(f"{self.label} order {order} already exists")
            if sibling.on == on:
                raise DuplicateSibling(f"{self.label} dated {on.isoformat()} already exists")
        if order < self.next_order:
            raise OrderViolation(f"{self.label} order must exceed {self.max_order}")
        self._check_floor(on)
        window = self.window_for(order)
        if not window.contains(on):
            raise OrderViolation(
                f"{self.label} date {on.isoformat()} must fall within {window.describe()}"
            )
        return window

    def check_move(self, sibling_id: UUID, on: date) -> Window:
        """Validate moving an existing sibling to ``on``."""
        current = self._get(sibling_id)
        if current.on == on:
            raise OrderViolation(f"{self.label} is already dated {on.isoformat()}")
        self._check_floor(on)
        window = self.window_for(current.order, exclude=sibling_id)
        if not window.contains(on):
            raise OutsideWindow(
                f"{self.label} date {on.isoformat()} must fall within {window.describe()}"
            )
        return window

    def _check_floor(self, on: date) -> None:
        if self.floor is not None and on < self.floor:
            raise OrderViolation(
                f"{self.label} date {on.isoformat()} precedes {self.floor.isoformat()}"
            )

    def _get(self, sibling_id: UUID) -> Sibling:
        for sibling in self.siblings:
            if sibling.id == sibling_id:
                return sibling
        raise KeyError(sibling_id)
