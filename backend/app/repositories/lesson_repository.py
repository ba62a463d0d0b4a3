"""
Lesson Repository - Data Access Layer for Lessons

All MongoDB operations on the lessons collection live here.
Reads return Lesson domain models built through Lesson.from_document.
"""
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database

from app.core.config import settings
from app.domain.lesson import Lesson


class LessonRepository:
    """
    Repository for Lesson data access

    Args:
        db: Database handle opened at startup
        collection_name: Lessons collection (default: settings.LESSONS_COLLECTION)
    """

    def __init__(self, db: Database, collection_name: Optional[str] = None):
        self.collection = db[collection_name or settings.LESSONS_COLLECTION]

    def find_all(self) -> List[Lesson]:
        """Return every lesson in insertion order"""
        return self.find_by_filter({})

    def find_by_filter(self, query: Dict[str, Any]) -> List[Lesson]:
        """
        Return lessons matching a MongoDB filter document

        Args:
            query: MongoDB filter ({} matches everything)
        """
        docs = self.collection.find(query).sort("_id", 1)
        return [Lesson.from_document(doc) for doc in docs]

    def update_fields(self, lesson_id: ObjectId, fields: Dict[str, Any]) -> Optional[Lesson]:
        """
        Apply a $set merge-patch to one lesson

        Args:
            lesson_id: Lesson ObjectId
            fields: Fields to set; fields not listed are left untouched

        Returns:
            The lesson after the update, or None if no document matched
        """
        doc = self.collection.find_one_and_update(
            {"_id": lesson_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return Lesson.from_document(doc) if doc else None

    def replace_all(self, lessons: List[Dict[str, Any]]) -> int:
        """
        Delete every lesson, then insert the given documents

        Returns:
            Number of lessons inserted
        """
        self.collection.delete_many({})
        if not lessons:
            return 0
        # insert_many adds _id to the dicts it is given
        result = self.collection.insert_many([dict(lesson) for lesson in lessons])
        return len(result.inserted_ids)

    def count(self) -> int:
        return self.collection.count_documents({})
