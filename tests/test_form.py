import json
from datetime import datetime

from portal.form import ContactForm
from portal.storage import ContactLog, MappingStore

KEY = "veloceCredentials"
NOW = datetime(2026, 10, 19, 14, 30, 0)


def valid_fields():
    return {
        "name": "  Ada Lovelace ",
        "email": "ada@example.com",
        "subject": "Engines",
        "message": "About the analytical engine.",
    }


def make_form(backing=None):
    log = ContactLog(MappingStore(backing if backing is not None else {}), KEY)
    return ContactForm(log, clock=lambda: NOW)


def test_valid_submission_appends_persists_and_resets():
    backing = {}
    form = make_form(backing)
    fields = valid_fields()

    outcome = form.submit(fields)

    assert outcome.accepted
    assert len(form.log) == 1
    record = form.log.records[0]
    assert record == outcome.record
    assert record.name == "Ada Lovelace"
    assert record.timestamp == "10/19/2026, 2:30:00 PM"
    assert json.loads(backing[KEY]) == [record.to_dict()]
    assert fields == {"name": "", "email": "", "subject": "", "message": ""}
    assert not form.errors.has_errors()
    assert "Name: Ada Lovelace" in outcome.acknowledgment
    assert "Email: ada@example.com" in outcome.acknowledgment


def test_invalid_field_blocks_submission():
    backing = {}
    form = make_form(backing)
    fields = valid_fields()
    fields["subject"] = "Hi"

    outcome = form.submit(fields)

    assert not outcome.accepted
    assert outcome.failed_fields == ["subject"]
    assert len(form.log) == 0
    assert KEY not in backing
    assert fields["subject"] == "Hi"
    assert fields["name"] == "  Ada Lovelace "
    assert form.errors.active() == {"subject": "Subject must be at least 3 characters"}
    assert form.errors.is_styled("subject")


def test_errors_for_fixed_fields_are_cleared_on_resubmit():
    form = make_form()
    fields = {"name": "a", "email": "nope", "subject": "Engines", "message": "short"}
    form.submit(fields)
    assert set(form.errors.active()) == {"name", "email", "message"}

    fields.update(name="Ada", email="ada@example.com")
    form.submit(fields)
    assert form.errors.active() == {"message": "Message must be at least 10 characters"}
    assert not form.errors.is_styled("name")


def test_duplicate_submissions_are_kept():
    form = make_form()
    form.submit(valid_fields())
    form.submit(valid_fields())
    assert len(form.log) == 2


def test_missing_fields_count_as_empty():
    form = make_form()
    outcome = form.submit({})
    assert outcome.failed_fields == ["name", "email", "subject", "message"]
    assert form.errors.message("email") == "Email is required"


def test_revalidate_clears_error_once_value_is_valid():
    form = make_form()
    form.errors.show("email", "Please enter a valid email address")

    form.revalidate("email", "ada@")
    assert form.errors.message("email") == "Please enter a valid email address"

    form.revalidate("email", "ada@example.com")
    assert form.errors.message("email") == ""
    assert not form.errors.is_styled("email")


def test_revalidate_leaves_empty_field_alone():
    form = make_form()
    form.errors.show("name", "Name is required")
    form.revalidate("name", "   ")
    assert form.errors.message("name") == "Name is required"
