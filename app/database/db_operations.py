"""
Database operations - CRUD functions for the ideas collection
"""
from typing import List, Dict, Optional
from bson import ObjectId
from pymongo.results import InsertOneResult
from app.config.database import db_config
from datetime import datetime, timezone

class DBOperations:
    """Database operations for the verified ideas collection"""

    @staticmethod
    async def create(document: Dict) -> InsertOneResult:
        """Insert a new document stamped with createdAt"""
        collection = await db_config.get_collection()
        document["createdAt"] = datetime.now(timezone.utc)
        return await collection.insert_one(document)

    @staticmethod
    async def get_by_id(doc_id: ObjectId) -> Optional[Dict]:
        """Get a single document by ID"""
        collection = await db_config.get_collection()
        return await collection.find_one({"_id": doc_id})

    @staticmethod
    async def get_all(filter_query: Dict = None, projection: Dict = None) -> List[Dict]:
        """Get every matching document, optionally projected"""
        collection = await db_config.get_collection()
        filter_query = filter_query or {}
        cursor = collection.find(filter_query, projection)
        return await cursor.to_list(length=None)

db_ops = DBOperations()
