"""
Domain Layer - Business Entities

Pydantic models for lessons and orders as exposed by the API.
"""
from app.domain.lesson import Lesson, LessonUpdate
from app.domain.order import Order, OrderItem, OrderCreate

__all__ = ['Lesson', 'LessonUpdate', 'Order', 'OrderItem', 'OrderCreate']
