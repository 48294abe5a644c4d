import asyncio
from datetime import datetime, timezone

import pytest
from bson import ObjectId

from app.services.idea_service import validate_idea_payload, parse_idea_id, create_idea
from app.utils.errors import ValidationError
from app.utils.helpers import serialize_doc


def test_valid_payload_passes(valid_payload):
    result = validate_idea_payload(valid_payload)

    assert result.valid is True
    assert result.field is None


def test_contributors_are_optional(valid_payload):
    assert validate_idea_payload(valid_payload).valid
    assert validate_idea_payload(dict(valid_payload, contributors={"any": "shape"})).valid


@pytest.mark.parametrize("value", ["", "   ", None])
def test_blank_values_count_as_missing(valid_payload, value):
    valid_payload["ideaOwner"] = value

    result = validate_idea_payload(valid_payload)

    assert result.valid is False
    assert result.field == "ideaOwner"


def test_zero_timestamp_is_present(valid_payload):
    valid_payload["timestamp"] = 0

    assert validate_idea_payload(valid_payload).valid


def test_reports_first_failing_field(valid_payload):
    del valid_payload["category"]
    del valid_payload["address"]

    assert validate_idea_payload(valid_payload).field == "address"


@pytest.mark.parametrize("value", ["docs", {"id": "1"}, 5])
def test_supporting_documents_must_be_a_list(valid_payload, value):
    valid_payload["supportingDocuments"] = value

    result = validate_idea_payload(valid_payload)

    assert result.valid is False
    assert result.field == "supportingDocuments"


def test_supporting_documents_with_items(valid_payload):
    valid_payload["supportingDocuments"] = [
        {"id": "d1", "url": "https://example.com/a.pdf", "type": "pdf", "name": "a.pdf"}
    ]

    assert validate_idea_payload(valid_payload).valid


@pytest.mark.parametrize("payload", [None, [], "idea", 42])
def test_non_object_payload_is_invalid(payload):
    assert validate_idea_payload(payload).valid is False


def test_create_idea_raises_before_store_access(valid_payload, ideas_collection):
    del valid_payload["currentStage"]

    with pytest.raises(ValidationError):
        asyncio.run(create_idea(valid_payload))

    assert ideas_collection.documents == []


@pytest.mark.parametrize("raw_id", [None, ""])
def test_parse_idea_id_missing(raw_id):
    with pytest.raises(ValidationError) as exc_info:
        parse_idea_id(raw_id)

    assert exc_info.value.message == "_id is required in query parameters"
    assert exc_info.value.status_code == 400


def test_parse_idea_id():
    oid = ObjectId()

    assert parse_idea_id(str(oid)) == oid
    with pytest.raises(ValidationError):
        parse_idea_id("123")


def test_serialize_doc_converts_bson_values():
    oid = ObjectId()
    doc = {
        "_id": oid,
        "createdAt": datetime(2024, 5, 1, 12, 30),
        "supportingDocuments": [{"id": "d1", "ref": oid}],
        "timestamp": 123,
    }

    assert serialize_doc(doc) == {
        "_id": str(oid),
        "createdAt": "2024-05-01T12:30:00+00:00",
        "supportingDocuments": [{"id": "d1", "ref": str(oid)}],
        "timestamp": 123,
    }


def test_serialize_doc_keeps_aware_datetimes_in_utc():
    aware = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

    assert serialize_doc({"createdAt": aware}) == {"createdAt": "2024-05-01T12:30:00+00:00"}
