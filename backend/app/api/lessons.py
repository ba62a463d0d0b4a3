"""
Lessons API Endpoints
Listing, search and partial updates of lessons

Endpoints:
- GET /lessons           - All lessons
- GET /search?q=<token>  - Case-insensitive multi-field search
- PUT /lessons/{id}      - Merge-patch a lesson (e.g. spaces after an order)
"""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.database import get_database
from app.core.errors import AppError, StoreError
from app.services.lesson_query_service import LessonQueryService
from app.services.lesson_mutation_service import LessonMutationService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/lessons")
def get_lessons(db: Database = Depends(get_database)) -> List[dict]:
    """
    Get all lessons

    Each lesson has id, subject, location, price, spaces, description,
    image and addedAt.
    """
    try:
        lessons = LessonQueryService(db).list_all()
        return [lesson.to_dict() for lesson in lessons]
    except PyMongoError as e:
        logger.error(f"GET /lessons failed: {e}")
        raise StoreError("Failed to fetch lessons")


@router.get("/search")
def search_lessons(
    q: Optional[str] = Query(None, description="Search subject, location, description; numbers also match price/spaces"),
    db: Database = Depends(get_database)
) -> List[dict]:
    """
    Search lessons

    Matches partial text case-insensitively. An empty query returns every
    lesson.
    """
    try:
        lessons = LessonQueryService(db).search(q)
        return [lesson.to_dict() for lesson in lessons]
    except PyMongoError as e:
        logger.error(f"GET /search failed: {e}")
        raise StoreError("Search failed")


@router.put("/lessons/{lesson_id}")
def update_lesson(
    lesson_id: str,
    fields: Any = Body(None),
    db: Database = Depends(get_database)
) -> dict:
    """
    Update lesson attributes

    Only the submitted fields change. "spaces" is stored as a number.
    """
    try:
        lesson = LessonMutationService(db).update_lesson(lesson_id, fields)
        return lesson.to_dict()
    except AppError:
        raise
    except PyMongoError as e:
        logger.error(f"PUT /lessons/{lesson_id} failed: {e}")
        raise StoreError("Failed to update lesson")
