"""
Helper utility functions
"""
from bson import ObjectId
from typing import Any, Dict, List
from datetime import datetime
import pytz


def serialize_value(value: Any) -> Any:
    """Convert a single BSON value to a JSON-serializable one"""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        # MongoDB hands back naive datetimes that are UTC
        if value.tzinfo is None:
            value = pytz.utc.localize(value)
        return value.astimezone(pytz.utc).isoformat()
    if isinstance(value, dict):
        return serialize_doc(value)
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def serialize_doc(doc: Dict) -> Dict:
    """Convert MongoDB document to JSON-serializable format"""
    if doc is None:
        return None
    return {key: serialize_value(value) for key, value in doc.items()}


def serialize_docs(docs: List[Dict]) -> List[Dict]:
    """Convert list of MongoDB documents to JSON-serializable format"""
    return [serialize_doc(doc) for doc in docs]


def serialize_insert_result(result) -> Dict:
    """Convert a pymongo InsertOneResult to the shape returned to clients"""
    return {
        "acknowledged": result.acknowledged,
        "insertedId": str(result.inserted_id),
    }
