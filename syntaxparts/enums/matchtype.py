from enum import auto, StrEnum


class MatchType(StrEnum):
    FULL = auto()
    PARTIAL = auto()
