"""
Lesson Domain Model

Represents a bookable lesson as exposed by the API. Documents in the
lessons collection may use the legacy field names "topic" and "space";
from_document maps both shapes onto the canonical ones so every read path
renders lessons identically.
"""
import math
from pydantic import BaseModel, Field, ConfigDict, StrictFloat, StrictInt, field_validator
from typing import Optional, Union
from datetime import datetime


class Lesson(BaseModel):
    """
    Lesson domain model - canonical response shape

    Fields:
        id: String form of the document ObjectId
        subject: Lesson subject (legacy documents store it as "topic")
        location: Where the lesson takes place
        price: Price per space
        spaces: Remaining spaces (legacy documents store it as "space")
        description: Lesson description
        image: Image path or URL
        added_at: Creation instant embedded in the ObjectId (JSON: addedAt)
    """

    id: str = Field(..., description="Lesson ID (stringified ObjectId)")
    subject: Optional[str] = Field(None, description="Lesson subject")
    location: Optional[str] = Field(None, description="Lesson location")
    price: Optional[Union[int, float]] = Field(None, description="Price per space")
    spaces: Optional[int] = Field(None, description="Available spaces")
    description: Optional[str] = Field(None, description="Lesson description")
    image: Optional[str] = Field(None, description="Image path or URL")
    added_at: datetime = Field(..., alias="addedAt", description="Creation timestamp")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_document(cls, doc: dict) -> "Lesson":
        """Build a Lesson from a raw lessons-collection document"""
        spaces = doc.get("spaces")
        if spaces is None:
            spaces = doc.get("space")

        return cls(
            id=str(doc["_id"]),
            subject=doc.get("subject") or doc.get("topic"),
            location=doc.get("location"),
            price=doc.get("price"),
            spaces=spaces,
            description=doc.get("description"),
            image=doc.get("image"),
            added_at=doc["_id"].generation_time,
        )

    def to_dict(self) -> dict:
        """Convert to the JSON response dict (camelCase addedAt)"""
        return self.model_dump(mode="json", by_alias=True)


class LessonUpdate(BaseModel):
    """
    Lesson partial-update schema - all fields optional

    Checks the types of the known lesson fields in a PUT body so nothing
    is stored that Lesson.from_document cannot read back. Other keys pass
    through untouched. Space counts ("spaces" and legacy "space") are
    coerced by LessonMutationService before this model sees the patch.
    """

    subject: Optional[str] = Field(None, description="Lesson subject")
    topic: Optional[str] = Field(None, description="Legacy name of subject")
    location: Optional[str] = Field(None, description="Lesson location")
    price: Optional[Union[StrictInt, StrictFloat]] = Field(None, description="Price per space")
    description: Optional[str] = Field(None, description="Lesson description")
    image: Optional[str] = Field(None, description="Image path or URL")

    model_config = ConfigDict(extra="allow")

    @field_validator("price")
    @classmethod
    def check_price(cls, value):
        if value is not None and (not math.isfinite(value) or value < 0):
            raise ValueError("price must be a non-negative number")
        return value
