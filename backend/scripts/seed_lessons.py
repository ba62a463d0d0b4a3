#!/usr/bin/env python3
"""
Seed the lessons collection
Deletes every lesson and inserts the fixed catalogue from seed_service

Usage:
    python scripts/seed_lessons.py

Requires MONGODB_URI (and optionally DB_NAME) in backend/.env or the environment.
"""
import sys
from pathlib import Path
from dotenv import load_dotenv

BACKEND_DIR = Path(__file__).resolve().parent.parent

# Load environment variables before app.core.config builds its settings
load_dotenv(BACKEND_DIR / '.env')
sys.path.insert(0, str(BACKEND_DIR))

from app.services.seed_service import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
