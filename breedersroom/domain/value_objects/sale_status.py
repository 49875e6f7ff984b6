from __future__ import annotations

from enum import Enum


class SaleStatus(str, Enum):
    NOT_FOR_SALE = "NOT_FOR_SALE"
    ON_SALE = "ON_SALE"
    ON_RESERVATION = "ON_RESERVATION"
    SOLD = "SOLD"

    @property
    def is_terminal(self) -> bool:
        return self is SaleStatus.SOLD
