"""
Resume editing operations.

Every operation returns a *new* resume dict (lists copied as well) and leaves
its input untouched, so snapshots held elsewhere never change underneath.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Any

from schema_resume import SCALAR_FIELDS, EXPERIENCE_SCHEMA, new_experience

logger = logging.getLogger(__name__)

DEFAULT_ROLE_LABEL = "Professional"


def _copy(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        **data,
        "experience": [dict(e) for e in data.get("experience", [])],
        "education": [dict(e) for e in data.get("education", [])],
    }


def update_field(data: Dict[str, Any], field: str, value: str) -> Dict[str, Any]:
    if field not in SCALAR_FIELDS:
        raise KeyError(f"Not an editable resume field: {field}")
    new = _copy(data)
    new[field] = value
    return new


def add_experience(data: Dict[str, Any]) -> Dict[str, Any]:
    new = _copy(data)
    new["experience"].append(new_experience())
    return new


def remove_experience(data: Dict[str, Any], exp_id: str) -> Dict[str, Any]:
    new = _copy(data)
    new["experience"] = [e for e in new["experience"] if e["id"] != exp_id]
    return new


def update_experience(data: Dict[str, Any], exp_id: str, field: str, value: str) -> Dict[str, Any]:
    if field == "id" or field not in EXPERIENCE_SCHEMA:
        raise KeyError(f"Not an editable experience field: {field}")
    new = _copy(data)
    for e in new["experience"]:
        if e["id"] == exp_id:
            e[field] = value
            break
    else:
        logger.debug("No experience entry with id %s; edit ignored", exp_id)
    return new


class ResumeEditor:
    """Editor state for one view: the current record plus the enhance busy flag.

    `on_update` receives every new record synchronously, right after the edit.
    """

    def __init__(self, data: Dict[str, Any], on_update: Callable[[Dict[str, Any]], None]):
        self.data = data
        self.on_update = on_update
        self.is_enhancing = False

    def _commit(self, new: Dict[str, Any]) -> None:
        self.data = new
        self.on_update(new)

    def change_field(self, field: str, value: str) -> None:
        self._commit(update_field(self.data, field, value))

    def add_experience(self) -> str:
        self._commit(add_experience(self.data))
        return self.data["experience"][-1]["id"]

    def remove_experience(self, exp_id: str) -> None:
        self._commit(remove_experience(self.data, exp_id))

    def change_experience(self, exp_id: str, field: str, value: str) -> None:
        self._commit(update_experience(self.data, exp_id, field, value))

    @property
    def can_enhance(self) -> bool:
        return bool(self.data["summary"].strip()) and not self.is_enhancing

    def role_label(self) -> str:
        return self.data.get("headline", "").strip() or DEFAULT_ROLE_LABEL

    def enhance_summary(self, gateway, role_label: str | None = None) -> bool:
        """Rewrite the summary through the gateway. Returns True if a call was made."""
        if not self.can_enhance:
            return False

        self.is_enhancing = True
        try:
            enhanced = gateway.enhance_summary(self.data["summary"], role_label or self.role_label())
        except Exception:
            logger.exception("Summary enhancement failed")
        else:
            self.change_field("summary", enhanced)
        finally:
            self.is_enhancing = False
        return True
