"""
Repository Layer - Data Access

This layer handles all MongoDB queries and returns domain models.
Repositories receive the database handle explicitly; none of them opens
its own connection.
"""
from app.repositories.lesson_repository import LessonRepository
from app.repositories.order_repository import OrderRepository

__all__ = [
    'LessonRepository',
    'OrderRepository'
]
