from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from erfpacht.adapters.logging_utils import get_logger, log_context
from erfpacht.domain.household import HouseholdInput
from erfpacht.domain.ports import StateStore
from erfpacht.services.validation import validate_and_prepare_payload

logger = get_logger(__name__)


def _merge_over_defaults(saved: dict) -> HouseholdInput:
    merged = HouseholdInput().model_dump()
    merged.update(validate_and_prepare_payload({"ground_value": merged["ground_value"], **saved}))
    return HouseholdInput(**merged)


class JsonFileStateStore(StateStore):
    """
    Wizard state kept in a single JSON file on this device.

    Saved fields are merged over the defaults on load; an unreadable file
    yields the defaults.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> HouseholdInput:
        if not self.path.exists():
            return HouseholdInput()
        try:
            saved = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(saved, dict):
                raise ValueError("saved state is not an object")
            return _merge_over_defaults(saved)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(
                "ignoring unreadable wizard state",
                extra=log_context(path=str(self.path), error=str(e)),
            )
            return HouseholdInput()

    def save(self, household: HouseholdInput) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(household.model_dump_json(indent=2), encoding="utf-8")
        tmp.replace(self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class InMemoryStateStore(StateStore):
    def __init__(self) -> None:
        self._saved: dict | None = None

    def load(self) -> HouseholdInput:
        if self._saved is None:
            return HouseholdInput()
        return _merge_over_defaults(self._saved)

    def save(self, household: HouseholdInput) -> None:
        self._saved = household.model_dump()

    def clear(self) -> None:
        self._saved = None
