"""
Centralized application configuration

Values come from environment variables or a .env file next to the backend.
"""
from pathlib import Path
from pydantic_settings import BaseSettings
from typing import List, Optional

BACKEND_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "After-school lessons API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Lessons catalogue, search and booking for the after-school lessons site"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000

    # MongoDB
    MONGODB_URI: Optional[str] = None
    DB_NAME: str = "courseworkDB"
    LESSONS_COLLECTION: str = "lessons"
    ORDERS_COLLECTION: str = "orders"

    # Static lesson images
    IMAGES_DIR: str = str(BACKEND_DIR / "public" / "images")

    LOG_LEVEL: str = "INFO"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:8080,https://yourdomain.com" or '["http://localhost:8080"]'
    ALLOWED_ORIGINS: Optional[str] = "*"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["*"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
