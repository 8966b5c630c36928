# src/erfpacht/domain/ports.py
from __future__ import annotations

from typing import Protocol

from erfpacht.domain.household import HouseholdInput


# ----------------------------
# Wizard state persistence
# ----------------------------

class StateStore(Protocol):
    def load(self) -> HouseholdInput:
        ...

    def save(self, household: HouseholdInput) -> None:
        ...

    def clear(self) -> None:
        ...
