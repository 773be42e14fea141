from datetime import datetime

import pytest

from portal.records import RECORD_COLUMNS, ContactRecord, display_timestamp, records_frame


def test_from_fields_trims_and_stamps():
    now = datetime(2026, 10, 19, 9, 5, 0)
    record = ContactRecord.from_fields(
        {"name": " Ada ", "email": " ada@example.com", "subject": "Hi there ", "message": "  Hello world!  "},
        now,
    )
    assert record.to_dict() == {
        "name": "Ada",
        "email": "ada@example.com",
        "subject": "Hi there",
        "message": "Hello world!",
        "timestamp": "10/19/2026, 9:05:00 AM",
    }


def test_from_dict_rejects_incomplete_rows():
    with pytest.raises(ValueError):
        ContactRecord.from_dict({"name": "Ada", "email": "ada@example.com"})


def test_records_frame_columns():
    empty = records_frame([])
    assert empty.empty
    assert list(empty.columns) == RECORD_COLUMNS

    record = ContactRecord("Ada", "ada@example.com", "Hello", "Hello world!", "now")
    df = records_frame([record, record])
    assert len(df) == 2
    assert df.iloc[0]["email"] == "ada@example.com"


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2026, 1, 2, 0, 5, 9), "1/2/2026, 12:05:09 AM"),
        (datetime(2026, 10, 19, 12, 0, 0), "10/19/2026, 12:00:00 PM"),
        (datetime(2026, 10, 19, 23, 59, 59), "10/19/2026, 11:59:59 PM"),
    ],
)
def test_display_timestamp_matches_browser_locale_string(now, expected):
    assert display_timestamp(now) == expected
