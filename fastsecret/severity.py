"""Severity levels attached to rules and copied into findings."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for rules."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, token: str) -> "Severity":
        """Return the member named by ``token``, ignoring case.

        Unknown tokens raise ``ValueError`` instead of falling back to a default.
        """

        lowered = str(token).lower()
        for member in cls:
            if member.value == lowered:
                return member
        raise ValueError(f"Unknown severity: {token}")

    @property
    def rank(self) -> int:
        """Return an integer ranking, higher is more severe."""

        ordering = {
            Severity.HIGH: 2,
            Severity.MEDIUM: 1,
            Severity.LOW: 0,
        }
        return ordering[self]

    @property
    def label(self) -> str:
        return self.value.upper()

    def __str__(self) -> str:
        return self.value
