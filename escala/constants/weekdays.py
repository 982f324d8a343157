"""Weekday table shared by the projector and every display helper.

Stored ``service_days`` integers only mean something under this mapping:
0 is Sunday (``dom``) and 6 is Saturday (``sab``).
"""

from enum import IntEnum
from typing import Optional


class Weekday(IntEnum):
    """Weekday index as stored in service orders."""

    DOM = 0
    SEG = 1
    TER = 2
    QUA = 3
    QUI = 4
    SEX = 5
    SAB = 6

    @property
    def key(self) -> str:
        """Short key used in work_schedule mappings ("dom", "seg", ...)."""
        return self.name.lower()

    @property
    def label(self) -> str:
        return DAY_LABELS[self]

    @property
    def short_label(self) -> str:
        return SHORT_DAY_LABELS[self]

    @classmethod
    def from_key(cls, key: str) -> Optional["Weekday"]:
        """Returns the weekday for a schedule key, or None for unknown keys."""
        try:
            return cls[str(key).strip().upper()]
        except KeyError:
            return None

    @classmethod
    def from_index(cls, index: int) -> Optional["Weekday"]:
        try:
            return cls(index)
        except (ValueError, TypeError):
            return None


DAY_LABELS = {
    Weekday.DOM: "Domingo",
    Weekday.SEG: "Segunda-feira",
    Weekday.TER: "Terça-feira",
    Weekday.QUA: "Quarta-feira",
    Weekday.QUI: "Quinta-feira",
    Weekday.SEX: "Sexta-feira",
    Weekday.SAB: "Sábado",
}

SHORT_DAY_LABELS = {
    Weekday.DOM: "Domingo",
    Weekday.SEG: "Segunda",
    Weekday.TER: "Terça",
    Weekday.QUA: "Quarta",
    Weekday.QUI: "Quinta",
    Weekday.SEX: "Sexta",
    Weekday.SAB: "Sábado",
}

# ["dom", "seg", "ter", "qua", "qui", "sex", "sab"]
DAY_KEYS = [day.key for day in Weekday]

INVALID_DAY_LABEL = "Dia inválido"
