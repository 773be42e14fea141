# portal/records.py

from dataclasses import asdict, dataclass, fields
from datetime import datetime

import pandas as pd


@dataclass(frozen=True)
class ContactRecord:
    """One accepted contact form submission."""

    name: str
    email: str
    subject: str
    message: str
    timestamp: str

    @classmethod
    def from_fields(cls, values, now: datetime):
        return cls(
            name=values["name"].strip(),
            email=values["email"].strip(),
            subject=values["subject"].strip(),
            message=values["message"].strip(),
            timestamp=display_timestamp(now),
        )

    @classmethod
    def from_dict(cls, data: dict):
        missing = [f for f in RECORD_COLUMNS if not isinstance(data.get(f), str)]
        if missing:
            raise ValueError(f"contact record is missing fields: {', '.join(missing)}")
        return cls(**{f: data[f] for f in RECORD_COLUMNS})

    def to_dict(self) -> dict:
        return asdict(self)


RECORD_COLUMNS = [f.name for f in fields(ContactRecord)]


def display_timestamp(now: datetime) -> str:
    """Format like a browser's en-US toLocaleString(): 10/19/2026, 2:30:00 PM."""
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now:%M:%S} {meridiem}"


def records_frame(records) -> pd.DataFrame:
    rows = [r.to_dict() for r in records]
    if not rows:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)
