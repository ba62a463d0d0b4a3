"""
Orders API Endpoints
Creates bookings

Endpoints:
- POST /orders - Create an order from {name, phone, email, items}
"""
import logging

from fastapi import APIRouter, Depends
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.database import get_database
from app.core.errors import AppError, StoreError
from app.domain.order import OrderCreate
from app.services.order_service import OrderService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/orders", status_code=201)
def create_order(order: OrderCreate, db: Database = Depends(get_database)) -> dict:
    """
    Create a new order

    Items are [{lessonId, spaces}] (legacy clients may send "quantity").
    Lesson spaces are not decremented here; call PUT /lessons/{id}.
    """
    try:
        created = OrderService(db).create_order(
            name=order.name,
            phone=order.phone,
            email=order.email,
            items=order.items
        )
        return created.to_dict()
    except AppError:
        raise
    except PyMongoError as e:
        logger.error(f"POST /orders failed: {e}")
        raise StoreError("Failed to create order")
