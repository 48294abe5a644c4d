"""
Verified idea service
Validates incoming submissions and maps the three API operations
(create, fetch one, fetch all) onto single MongoDB calls.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId

from app.database.db_operations import db_ops
from app.models.verified_idea import (
    REQUIRED_FIELDS,
    OPTIONAL_FIELDS,
    IDEA_SUMMARY_PROJECTION,
)
from app.utils.errors import ValidationError, NotFoundError
from app.utils.helpers import serialize_doc, serialize_docs, serialize_insert_result

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    valid: bool
    # First failing field, for server logs only
    field: Optional[str] = None


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def validate_idea_payload(payload: Any) -> ValidationResult:
    """
    Check that every required field is present and that
    supportingDocuments is a list. Zero and False count as present;
    missing keys, None and blank strings do not.
    """
    if not isinstance(payload, dict):
        return ValidationResult(valid=False)

    for field in REQUIRED_FIELDS:
        if not _is_present(payload.get(field)):
            return ValidationResult(valid=False, field=field)

    if not isinstance(payload["supportingDocuments"], (list, tuple)):
        return ValidationResult(valid=False, field="supportingDocuments")

    return ValidationResult(valid=True)


async def create_idea(payload: Any) -> Dict:
    """Validate and insert a submission, returning the insert result"""
    result = validate_idea_payload(payload)
    if not result.valid:
        logger.info("Rejected idea submission: invalid field %r", result.field)
        raise ValidationError()

    # Unknown keys, _id and createdAt from the client are not stored
    document = {field: payload[field] for field in REQUIRED_FIELDS}
    for field in OPTIONAL_FIELDS:
        if field in payload:
            document[field] = payload[field]
    insert_result = await db_ops.create(document)
    logger.info("💡 Idea saved: %s", insert_result.inserted_id)
    return serialize_insert_result(insert_result)


def parse_idea_id(raw_id: Optional[str]) -> ObjectId:
    if not raw_id:
        raise ValidationError("_id is required in query parameters")
    try:
        return ObjectId(raw_id)
    except (InvalidId, TypeError) as exc:
        raise ValidationError("_id is not a valid identifier") from exc


async def fetch_idea(raw_id: Optional[str]) -> Dict:
    """Get a single idea by its MongoDB _id"""
    idea_id = parse_idea_id(raw_id)
    idea = await db_ops.get_by_id(idea_id)
    if not idea:
        raise NotFoundError()
    return serialize_doc(idea)


async def fetch_all_ideas() -> List[Dict]:
    """Get every idea, projected to the summary fields"""
    ideas = await db_ops.get_all(projection=IDEA_SUMMARY_PROJECTION)
    return serialize_docs(ideas)
