"""
Order Service
Validates and persists bookings

An order references one or more lessons with a requested space count.
Availability is not checked here: clients decrement lesson spaces through
PUT /lessons/{id} after the order is accepted.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo.database import Database

from app.core.database import to_object_id
from app.core.errors import InvalidRequestError
from app.domain.order import Order
from app.repositories.order_repository import OrderRepository
from app.services.coercion import coerce_space_count, require_text

logger = logging.getLogger(__name__)


class OrderService:
    """Write-side operations on orders"""

    def __init__(self, db: Database):
        self.repo = OrderRepository(db)

    def create_order(
        self,
        name: Any,
        phone: Any,
        email: Optional[str],
        items: Any
    ) -> Order:
        """
        Validate and store a new order

        Args:
            name: Customer name (required, non-blank)
            phone: Customer phone (required, non-blank)
            email: Customer email (optional)
            items: Non-empty list of {lessonId, spaces} objects; the legacy
                key "quantity" is read when "spaces" is missing

        Returns:
            The persisted Order with its new id

        Raises:
            InvalidRequestError: Missing fields, empty items or bad counts
            InvalidIdentifierError: A lessonId is not a valid ObjectId
        """
        if not require_text(name) or not require_text(phone) or not isinstance(items, list) or not items:
            raise InvalidRequestError("Missing required order fields")

        doc = {
            "name": name,
            "phone": phone,
            "email": email,
            "items": self._parse_items(items),
            "createdAt": datetime.now(timezone.utc),
        }

        order = self.repo.insert(doc)
        logger.info(f"Created order {order.id} for {len(order.items)} lesson(s)")
        return order

    @staticmethod
    def _parse_items(items: List[Any]) -> List[Dict[str, Any]]:
        """Convert request items into stored items ({lessonId: ObjectId, spaces: int})"""
        parsed = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise InvalidRequestError(f"items[{index}] must be an object")

            lesson_id = to_object_id(item.get("lessonId"), field=f"items[{index}].lessonId")
            # Falsy counts (missing, 0, "") fall through to the legacy key, then 0
            raw_spaces = item.get("spaces") or item.get("quantity") or 0

            parsed.append({
                "lessonId": lesson_id,
                "spaces": coerce_space_count(raw_spaces, field=f"items[{index}].spaces"),
            })
        return parsed
