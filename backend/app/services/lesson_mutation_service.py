"""
Lesson Mutation Service
Partial updates to lessons, mainly setting remaining spaces after a booking

The update is a plain $set of the submitted value. Clients compute the new
space count from a previous read, so two concurrent bookings of the same
lesson can both succeed and oversell it.
"""
import logging
from typing import Any, Dict

from pydantic import ValidationError
from pymongo.database import Database

from app.core.database import to_object_id
from app.core.errors import InvalidRequestError, NotFoundError
from app.domain.lesson import Lesson, LessonUpdate
from app.repositories.lesson_repository import LessonRepository
from app.services.coercion import coerce_space_count

logger = logging.getLogger(__name__)

# Keys of the lesson response shape that are not stored fields
READ_ONLY_FIELDS = ("_id", "id", "addedAt")

# Space counts, canonical and legacy name
COUNT_FIELDS = ("spaces", "space")


class LessonMutationService:
    """Write-side operations on lessons"""

    def __init__(self, db: Database):
        self.repo = LessonRepository(db)

    def update_lesson(self, lesson_id: str, fields: Dict[str, Any]) -> Lesson:
        """
        Merge-patch one lesson

        Args:
            lesson_id: Lesson id (24-char hex ObjectId string)
            fields: Fields to set; others are left untouched. "spaces" (and
                legacy "space") is coerced to a non-negative int, and the
                other lesson fields must have the types LessonUpdate declares.

        Returns:
            The lesson after the update

        Raises:
            InvalidIdentifierError: lesson_id is not a valid ObjectId
            InvalidRequestError: Body is not an object, has nothing to set,
                or carries a value of the wrong type
            NotFoundError: No lesson has this id
        """
        object_id = to_object_id(lesson_id)

        if not isinstance(fields, dict):
            raise InvalidRequestError("Lesson update must be a JSON object")

        update = {key: value for key, value in fields.items() if key not in READ_ONLY_FIELDS}
        if not update:
            raise InvalidRequestError("No lesson fields to update")
        if any(key.startswith("$") for key in update):
            raise InvalidRequestError("Lesson field names cannot start with '$'")

        for key in COUNT_FIELDS:
            if key in update:
                update[key] = coerce_space_count(update[key], field=key)

        try:
            LessonUpdate.model_validate(update)
        except ValidationError as e:
            raise InvalidRequestError(f"Invalid lesson fields: {_describe(e)}") from e

        lesson = self.repo.update_fields(object_id, update)
        if lesson is None:
            raise NotFoundError("Lesson not found")

        logger.info(f"Updated lesson {lesson.id}: {sorted(update)}")
        return lesson


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in problem.get('loc', ()))}: {problem.get('msg')}"
        for problem in error.errors()
    )
