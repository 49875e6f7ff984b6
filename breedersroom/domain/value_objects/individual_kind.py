from __future__ import annotations

from enum import Enum


class IndividualKind(str, Enum):
    PET = "PET"
    EGG = "EGG"
