"""
Order Domain Models

An order is a customer's booking of spaces in one or more lessons.
Orders are written once and never updated.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Optional, List
from datetime import datetime


class OrderItem(BaseModel):
    """
    Order line item

    Fields:
        lesson_id: Referenced lesson (JSON: lessonId). Not checked against
            the lessons collection.
        spaces: Number of spaces requested
    """

    lesson_id: str = Field(..., alias="lessonId", description="Lesson ID (stringified ObjectId)")
    spaces: int = Field(0, description="Spaces requested", ge=0)

    model_config = ConfigDict(populate_by_name=True)


class Order(BaseModel):
    """
    Order domain model - represents a persisted booking

    Fields:
        id: String form of the order ObjectId
        name: Customer name
        phone: Customer phone
        email: Customer email (optional)
        items: Booked lessons and space counts, in request order
        created_at: Server-assigned creation time (JSON: createdAt)
    """

    id: str = Field(..., description="Order ID (stringified ObjectId)")
    name: str = Field(..., description="Customer name")
    phone: str = Field(..., description="Customer phone")
    email: Optional[str] = Field(None, description="Customer email")
    items: List[OrderItem] = Field(..., description="Order line items")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_document(cls, doc: dict) -> "Order":
        """Build an Order from a raw orders-collection document"""
        return cls(
            id=str(doc["_id"]),
            name=doc["name"],
            phone=doc["phone"],
            email=doc.get("email"),
            items=[
                OrderItem(lesson_id=str(item["lessonId"]), spaces=item["spaces"])
                for item in doc["items"]
            ],
            created_at=doc["createdAt"],
        )

    def to_dict(self) -> dict:
        """Convert to the JSON response dict (camelCase keys)"""
        return self.model_dump(mode="json", by_alias=True)


class OrderCreate(BaseModel):
    """
    Request body for POST /orders

    All fields are optional here; OrderService validates them.
    """
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    items: Optional[Any] = None
