# portal/errors.py

"""Inline error state for form fields.

This is the state half of error presentation; portal.ui draws it. A field's
error slot is created the first time an error is shown and reused after that,
so showing or clearing twice leaves the same state behind.
"""

from dataclasses import dataclass


ERROR_COLOR = "rgb(255, 84, 89)"
ERROR_BORDER_WIDTH = "2px"


def error_element_id(field: str) -> str:
    return f"{field}-error"


@dataclass
class ErrorSlot:
    text: str = ""


class FieldErrorDisplay:
    def __init__(self):
        self._slots = {}
        self._styled = set()

    def show(self, field: str, message: str):
        slot = self._slots.setdefault(field, ErrorSlot())
        slot.text = message
        self._styled.add(field)

    def clear(self, field: str):
        slot = self._slots.get(field)
        if slot is not None:
            slot.text = ""
        self._styled.discard(field)

    def clear_all(self, fields):
        for field in fields:
            self.clear(field)

    def has_slot(self, field: str) -> bool:
        return field in self._slots

    def message(self, field: str) -> str:
        slot = self._slots.get(field)
        return slot.text if slot is not None else ""

    def is_styled(self, field: str) -> bool:
        return field in self._styled

    def active(self) -> dict:
        """Fields currently showing an error, mapped to their text."""
        return {field: slot.text for field, slot in self._slots.items() if slot.text}

    def has_errors(self) -> bool:
        return bool(self.active())
