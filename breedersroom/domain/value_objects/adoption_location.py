from __future__ import annotations

from enum import Enum


class AdoptionLocation(str, Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
