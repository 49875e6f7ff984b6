from __future__ import annotations

from enum import Enum


class EggStatus(str, Enum):
    FERTILIZED = "FERTILIZED"
    UNFERTILIZED = "UNFERTILIZED"
    DEAD = "DEAD"
