"""
Lesson Query Service
Builds and runs the read queries behind GET /lessons and GET /search

Search semantics:
- The raw token is trimmed and lowercased; an empty token lists everything
- Text match is a case-insensitive substring match on subject/topic,
  location and description, OR-combined
- A numeric token also matches price and spaces/space exactly
"""
import re
import logging
from typing import Any, Dict, List, Optional

from pymongo.database import Database

from app.domain.lesson import Lesson
from app.repositories.lesson_repository import LessonRepository
from app.services.coercion import parse_number

logger = logging.getLogger(__name__)

# Legacy documents use "topic" instead of "subject"
TEXT_FIELDS = ("subject", "topic", "location", "description")
# Legacy documents use "space" instead of "spaces"
NUMERIC_FIELDS = ("price", "spaces", "space")


def normalize_query(raw: Optional[str]) -> str:
    """Trim and lowercase a raw search token (None becomes "")"""
    return str(raw if raw is not None else "").strip().lower()


def build_search_filter(query: Optional[str]) -> Dict[str, Any]:
    """
    Build the MongoDB filter for a search token

    Args:
        query: Raw search token (normalized here)

    Returns:
        {} for an empty token, otherwise an $or filter

    Example:
        build_search_filter("38") ->
            {"$or": [{"subject": {"$regex": "38", "$options": "i"}}, ...,
                     {"price": 38}, {"spaces": 38}, {"space": 38}]}
    """
    q = normalize_query(query)
    if not q:
        return {}

    # Substring match on the literal token, not a user-supplied pattern
    pattern = re.escape(q)
    conditions: List[Dict[str, Any]] = [
        {field: {"$regex": pattern, "$options": "i"}} for field in TEXT_FIELDS
    ]

    number = parse_number(q)
    if number is not None:
        conditions.extend({field: number} for field in NUMERIC_FIELDS)

    return {"$or": conditions}


class LessonQueryService:
    """Read-side operations on lessons"""

    def __init__(self, db: Database):
        self.repo = LessonRepository(db)

    def list_all(self) -> List[Lesson]:
        """Return every lesson in the canonical response shape"""
        return self.repo.find_all()

    def search(self, query: Optional[str]) -> List[Lesson]:
        """
        Search lessons by text or number

        An empty (or whitespace-only) query returns the same result as
        list_all().
        """
        search_filter = build_search_filter(query)
        if not search_filter:
            return self.list_all()

        lessons = self.repo.find_by_filter(search_filter)
        logger.debug(f"Search {normalize_query(query)!r} matched {len(lessons)} lessons")
        return lessons
