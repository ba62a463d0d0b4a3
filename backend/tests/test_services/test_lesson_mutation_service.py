"""
Tests for LessonMutationService.update_lesson
"""
import pytest
from bson import ObjectId

from app.core.errors import InvalidIdentifierError, InvalidRequestError, NotFoundError
from app.services.lesson_mutation_service import LessonMutationService


@pytest.fixture
def lesson_id(mongo_db, sample_lesson_data):
    return mongo_db.lessons.insert_one(dict(sample_lesson_data)).inserted_id


class TestUpdateLesson:

    def test_updates_spaces(self, mongo_db, lesson_id):
        lesson = LessonMutationService(mongo_db).update_lesson(str(lesson_id), {"spaces": 3})

        assert lesson.id == str(lesson_id)
        assert lesson.spaces == 3
        assert lesson.subject == "Music Ensemble"

    def test_numeric_string_spaces_are_stored_as_number(self, mongo_db, lesson_id):
        LessonMutationService(mongo_db).update_lesson(str(lesson_id), {"spaces": "4"})

        stored = mongo_db.lessons.find_one({"_id": lesson_id})
        assert stored["spaces"] == 4
        assert isinstance(stored["spaces"], int)

    def test_merge_patch_leaves_other_fields(self, mongo_db, lesson_id):
        LessonMutationService(mongo_db).update_lesson(str(lesson_id), {"location": "Main Hall"})

        stored = mongo_db.lessons.find_one({"_id": lesson_id})
        assert stored["location"] == "Main Hall"
        assert stored["spaces"] == 5
        assert stored["price"] == 37

    def test_response_only_keys_are_ignored(self, mongo_db, lesson_id):
        """Test a client echoing a full lesson object back does not touch _id"""
        LessonMutationService(mongo_db).update_lesson(
            str(lesson_id),
            {"id": "something", "addedAt": "2026-01-01T00:00:00Z", "spaces": 1}
        )

        stored = mongo_db.lessons.find_one({"_id": lesson_id})
        assert stored["spaces"] == 1
        assert "id" not in stored
        assert "addedAt" not in stored

    def test_legacy_document_gets_canonical_spaces(self, mongo_db, legacy_lesson_data):
        legacy_id = mongo_db.lessons.insert_one(dict(legacy_lesson_data)).inserted_id

        lesson = LessonMutationService(mongo_db).update_lesson(str(legacy_id), {"spaces": 2})

        assert lesson.spaces == 2
        assert lesson.subject == "Music Ensemble"

    def test_unknown_id_is_not_found_and_creates_nothing(self, mongo_db, lesson_id):
        with pytest.raises(NotFoundError):
            LessonMutationService(mongo_db).update_lesson(str(ObjectId()), {"spaces": 3})

        assert mongo_db.lessons.count_documents({}) == 1

    def test_malformed_id_is_identifier_error_not_not_found(self, mongo_db):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            LessonMutationService(mongo_db).update_lesson("12345", {"spaces": 3})

        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("spaces", ["abc", -1, 2.5, None])
    def test_invalid_spaces(self, mongo_db, lesson_id, spaces):
        with pytest.raises(InvalidRequestError):
            LessonMutationService(mongo_db).update_lesson(str(lesson_id), {"spaces": spaces})

        assert mongo_db.lessons.find_one({"_id": lesson_id})["spaces"] == 5

    @pytest.mark.parametrize("fields", [None, {}, {"id": "x"}, ["spaces", 3], {"$inc": {"spaces": 1}}])
    def test_invalid_patch(self, mongo_db, lesson_id, fields):
        with pytest.raises(InvalidRequestError):
            LessonMutationService(mongo_db).update_lesson(str(lesson_id), fields)

    @pytest.mark.parametrize("fields", [
        {"price": "free"},
        {"price": -1},
        {"price": True},
        {"subject": 42},
        {"location": ["Room 1"]},
        {"space": "lots"},
    ])
    def test_mistyped_fields_are_rejected_before_writing(self, mongo_db, lesson_id, fields):
        # Arrange
        before = mongo_db.lessons.find_one({"_id": lesson_id})

        # Act
        with pytest.raises(InvalidRequestError) as exc_info:
            LessonMutationService(mongo_db).update_lesson(str(lesson_id), fields)

        # Assert
        assert exc_info.value.category == "validation"
        assert mongo_db.lessons.find_one({"_id": lesson_id}) == before

    def test_typed_fields_are_updated(self, mongo_db, lesson_id):
        lesson = LessonMutationService(mongo_db).update_lesson(
            str(lesson_id),
            {"price": 39.5, "subject": "Jazz Ensemble", "image": None}
        )

        assert lesson.price == 39.5
        assert lesson.subject == "Jazz Ensemble"
        assert lesson.image is None

    def test_unknown_fields_pass_through(self, mongo_db, lesson_id):
        LessonMutationService(mongo_db).update_lesson(str(lesson_id), {"teacher": "Ms. Rivera"})

        assert mongo_db.lessons.find_one({"_id": lesson_id})["teacher"] == "Ms. Rivera"

    def test_legacy_space_is_coerced(self, mongo_db, legacy_lesson_data):
        legacy_id = mongo_db.lessons.insert_one(dict(legacy_lesson_data)).inserted_id

        LessonMutationService(mongo_db).update_lesson(str(legacy_id), {"space": "2"})

        assert mongo_db.lessons.find_one({"_id": legacy_id})["space"] == 2
