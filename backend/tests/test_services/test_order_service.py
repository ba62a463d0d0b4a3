"""
Tests for OrderService.create_order
"""
from datetime import datetime

import pytest
from bson import ObjectId

from app.core.errors import InvalidIdentifierError, InvalidRequestError
from app.services.order_service import OrderService


@pytest.fixture
def service(mongo_db):
    return OrderService(mongo_db)


class TestCreateOrderValidation:
    """Rejected orders persist nothing"""

    @pytest.mark.parametrize("name, phone", [
        ("", "123"),
        ("   ", "123"),
        (None, "123"),
        ("Ada", ""),
        ("Ada", None),
    ])
    def test_missing_name_or_phone(self, service, mongo_db, name, phone):
        items = [{"lessonId": str(ObjectId()), "spaces": 1}]

        with pytest.raises(InvalidRequestError, match="Missing required order fields"):
            service.create_order(name, phone, None, items)

        assert mongo_db.orders.count_documents({}) == 0

    @pytest.mark.parametrize("items", [None, [], "not-a-list", {"lessonId": "x"}])
    def test_items_must_be_non_empty_list(self, service, mongo_db, items):
        with pytest.raises(InvalidRequestError):
            service.create_order("Ada", "123", None, items)

        assert mongo_db.orders.count_documents({}) == 0

    def test_invalid_lesson_id_is_identifier_error(self, service, mongo_db):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            service.create_order("Ada", "123", None, [{"lessonId": "not-an-id", "spaces": 1}])

        assert exc_info.value.category == "invalid_id"
        assert "items[0].lessonId" in exc_info.value.message
        assert mongo_db.orders.count_documents({}) == 0

    def test_missing_lesson_id_is_identifier_error(self, service):
        with pytest.raises(InvalidIdentifierError):
            service.create_order("Ada", "123", None, [{"spaces": 1}])

    def test_item_must_be_object(self, service):
        with pytest.raises(InvalidRequestError, match=r"items\[0\]"):
            service.create_order("Ada", "123", None, ["abc"])

    @pytest.mark.parametrize("spaces", ["two", -1, 1.5, True])
    def test_invalid_space_count(self, service, mongo_db, spaces):
        with pytest.raises(InvalidRequestError):
            service.create_order("Ada", "123", None, [{"lessonId": str(ObjectId()), "spaces": spaces}])

        assert mongo_db.orders.count_documents({}) == 0

    def test_later_invalid_item_rejects_whole_order(self, service, mongo_db):
        items = [
            {"lessonId": str(ObjectId()), "spaces": 1},
            {"lessonId": "bad", "spaces": 1},
        ]

        with pytest.raises(InvalidIdentifierError):
            service.create_order("Ada", "123", None, items)

        assert mongo_db.orders.count_documents({}) == 0


class TestCreateOrder:
    """Successful order creation"""

    def test_persists_order_matching_input(self, service, mongo_db):
        lesson_id = ObjectId()

        order = service.create_order(
            "Ada Lovelace", "07700 900123", "ada@example.com",
            [{"lessonId": str(lesson_id), "spaces": 2}]
        )

        assert order.id
        assert order.name == "Ada Lovelace"
        assert order.items[0].lesson_id == str(lesson_id)
        assert order.items[0].spaces == 2
        assert isinstance(order.created_at, datetime)

        stored = list(mongo_db.orders.find())
        assert len(stored) == 1
        assert stored[0]["_id"] == ObjectId(order.id)
        assert stored[0]["items"] == [{"lessonId": lesson_id, "spaces": 2}]
        assert stored[0]["phone"] == "07700 900123"
        assert stored[0]["email"] == "ada@example.com"
        assert "createdAt" in stored[0]

    def test_email_is_optional(self, service):
        order = service.create_order("Ada", "123", None, [{"lessonId": str(ObjectId()), "spaces": 1}])

        assert order.email is None

    def test_legacy_quantity_is_used_when_spaces_missing(self, service):
        order = service.create_order("Ada", "123", None, [{"lessonId": str(ObjectId()), "quantity": 3}])

        assert order.items[0].spaces == 3

    def test_zero_spaces_falls_back_to_quantity(self, service):
        order = service.create_order("Ada", "123", None, [{"lessonId": str(ObjectId()), "spaces": 0, "quantity": 4}])

        assert order.items[0].spaces == 4

    def test_spaces_default_to_zero(self, service):
        order = service.create_order("Ada", "123", None, [{"lessonId": str(ObjectId())}])

        assert order.items[0].spaces == 0

    def test_numeric_strings_are_coerced(self, service, mongo_db):
        order = service.create_order("Ada", "123", None, [{"lessonId": str(ObjectId()), "spaces": "2"}])

        assert order.items[0].spaces == 2
        assert mongo_db.orders.find_one()["items"][0]["spaces"] == 2

    def test_dangling_lesson_id_is_accepted(self, service, mongo_db):
        """Test lessons are referenced by value without an existence check"""
        order = service.create_order("Ada", "123", None, [{"lessonId": str(ObjectId()), "spaces": 1}])

        assert mongo_db.lessons.count_documents({}) == 0
        assert order.id

    def test_items_keep_request_order(self, service):
        ids = [str(ObjectId()) for _ in range(3)]

        order = service.create_order("Ada", "123", None, [{"lessonId": i, "spaces": 1} for i in ids])

        assert [item.lesson_id for item in order.items] == ids
