# portal/form.py

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from portal.errors import FieldErrorDisplay
from portal.records import ContactRecord
from portal.validators import FIELDS, VALIDATORS, ValidationResult, validate_fields

logger = logging.getLogger(__name__)


@dataclass
class SubmissionOutcome:
    accepted: bool
    results: Dict[str, ValidationResult] = field(default_factory=dict)
    record: Optional[ContactRecord] = None
    acknowledgment: str = ""

    @property
    def failed_fields(self):
        return [f for f, result in self.results.items() if not result.valid]


def acknowledgment_for(record: ContactRecord) -> str:
    return (
        "✅ Form submitted successfully!\n\n"
        f"Name: {record.name}\n"
        f"Email: {record.email}\n\n"
        "Credentials stored at client-side."
    )


class ContactForm:
    """Validates contact form submissions and records the accepted ones.

    ``fields`` passed to submit() is the live widget state (st.session_state
    in the app, a dict in tests). It is only written to when the submission is
    accepted, to reset the inputs.
    """

    def __init__(self, log, errors: FieldErrorDisplay = None, clock=None):
        self.log = log
        self.errors = errors if errors is not None else FieldErrorDisplay()
        self.clock = clock or datetime.now

    def submit(self, fields) -> SubmissionOutcome:
        values = {f: fields.get(f) or "" for f in FIELDS}
        results = validate_fields(values)

        self.errors.clear_all(FIELDS)
        for name, result in results.items():
            if not result.valid:
                self.errors.show(name, result.message)

        outcome = SubmissionOutcome(accepted=False, results=results)
        if outcome.failed_fields:
            logger.debug("Submission rejected, failing fields: %s", outcome.failed_fields)
            return outcome

        record = ContactRecord.from_fields(values, self.clock())
        self.log.append(record)

        for name in FIELDS:
            fields[name] = ""

        outcome.accepted = True
        outcome.record = record
        outcome.acknowledgment = acknowledgment_for(record)
        return outcome

    def revalidate(self, field_name: str, value) -> ValidationResult:
        """Clear a field's error as soon as its value becomes valid while typing."""
        result = VALIDATORS[field_name](value)
        if isinstance(value, str) and value.strip() and result.valid:
            self.errors.clear(field_name)
        return result
