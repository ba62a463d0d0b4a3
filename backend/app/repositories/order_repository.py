"""
Order Repository - Data Access Layer for Orders

Orders are insert-only: the API creates them and never changes them.
"""
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.database import Database

from app.core.config import settings
from app.domain.order import Order


class OrderRepository:
    """Repository for Order data access"""

    def __init__(self, db: Database, collection_name: Optional[str] = None):
        self.collection = db[collection_name or settings.ORDERS_COLLECTION]

    def insert(self, doc: Dict[str, Any]) -> Order:
        """
        Persist a new order document

        Args:
            doc: Order document without _id (name, phone, email, items, createdAt)

        Returns:
            The stored order, including its new id
        """
        doc = dict(doc)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return Order.from_document(doc)

    def find_by_id(self, order_id: ObjectId) -> Optional[Order]:
        doc = self.collection.find_one({"_id": order_id})
        return Order.from_document(doc) if doc else None
