"""
Seed Service
Resets the lessons collection to a fixed catalogue

Intended for bootstrapping a fresh environment (see scripts/seed_lessons.py
or the seed-lessons console script), not for production traffic.

Usage:
    seed-lessons
    python scripts/seed_lessons.py
"""
import sys
import logging
from typing import Any, Dict, List, Optional

from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.config import settings
from app.core.database import connect
from app.core.errors import StoreError
from app.core.logging_config import setup_logging
from app.repositories.lesson_repository import LessonRepository

logger = logging.getLogger(__name__)


SEED_LESSONS: List[Dict[str, Any]] = [
    {
        "subject": "Algebra II",
        "location": "Room 204",
        "price": 38,
        "spaces": 5,
        "description": "Quadratic, exponential, and polynomial problem solving with guided practice.",
        "image": "/images/algebra.svg",
    },
    {
        "subject": "Biology Lab",
        "location": "Science Lab B",
        "price": 42,
        "spaces": 5,
        "description": "Microscope work and dissections that bring cellular biology to life.",
        "image": "/images/biology-lab.svg",
    },
    {
        "subject": "Chemistry Honors",
        "location": "Chemistry Lab",
        "price": 44,
        "spaces": 5,
        "description": "Reactions, stoichiometry, and weekly safety-focused experiments.",
        "image": "/images/chemistry-honors.svg",
    },
    {
        "subject": "Physics Workshop",
        "location": "Innovation Studio",
        "price": 46,
        "spaces": 5,
        "description": "Motion labs, energy challenges, and simple robotics tie-ins.",
        "image": "/images/physics-workshop.svg",
    },
    {
        "subject": "English Literature",
        "location": "Library Commons",
        "price": 36,
        "spaces": 5,
        "description": "Close reading, essay writing, and seminar-style discussions.",
        "image": "/images/english-literature.svg",
    },
    {
        "subject": "World History",
        "location": "Room 112",
        "price": 34,
        "spaces": 5,
        "description": "Global movements and key decisions from ancient to modern eras.",
        "image": "/images/world-history.svg",
    },
    {
        "subject": "Computer Science Principles",
        "location": "Tech Lab",
        "price": 48,
        "spaces": 5,
        "description": "Algorithms, interactive apps, and ethical computing foundations.",
        "image": "/images/computer-science-principles.svg",
    },
    {
        "subject": "French Conversation",
        "location": "Language Studio",
        "price": 33,
        "spaces": 5,
        "description": "Roleplay, listening drills, and everyday vocabulary.",
        "image": "/images/french-conversation.svg",
    },
    {
        "subject": "Studio Art",
        "location": "Art Atelier",
        "price": 40,
        "spaces": 5,
        "description": "Charcoal, acrylics, and mixed media portfolio pieces.",
        "image": "/images/studio-art.svg",
    },
    {
        "subject": "Music Ensemble",
        "location": "Music Room",
        "price": 37,
        "spaces": 5,
        "description": "Contemporary charts and small-group performance skills.",
        "image": "/images/music-ensemble.svg",
    },
    {
        "subject": "AP Economics",
        "location": "Room 305",
        "price": 45,
        "spaces": 5,
        "description": "Market simulations and data-driven policy case studies.",
        "image": "/images/ap-economics.svg",
    },
    {
        "subject": "Health & Wellness",
        "location": "Wellness Center",
        "price": 32,
        "spaces": 5,
        "description": "Nutrition, mindfulness, and fitness planning for balanced living.",
        "image": "/images/health-wellness.svg",
    },
    {
        "subject": "Environmental Science",
        "location": "Greenhouse Lab",
        "price": 41,
        "spaces": 5,
        "description": "Ecosystems, sustainability challenges, and field data collection.",
        "image": "/images/environmental-science.svg",
    },
]


def reseed(db: Database, lessons: Optional[List[Dict[str, Any]]] = None) -> int:
    """
    Replace the contents of the lessons collection

    Args:
        db: Database handle
        lessons: Documents to insert verbatim (default: SEED_LESSONS)

    Returns:
        Number of lessons inserted
    """
    if lessons is None:
        lessons = SEED_LESSONS

    repo = LessonRepository(db)
    inserted = repo.replace_all(lessons)
    logger.info(f"Inserted {inserted} lessons.")
    return inserted


def main() -> int:
    """Entry point for the seed-lessons script. Returns the exit code."""
    setup_logging(settings.LOG_LEVEL)

    try:
        client, db = connect()
    except StoreError as e:
        logger.error(f"Failed to seed lessons: {e.message}")
        return 1

    try:
        logger.info(f"Connected to {db.name}, seeding lessons...")
        reseed(db)
        return 0
    except PyMongoError as e:
        logger.error(f"Failed to seed lessons: {e}")
        return 1
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
