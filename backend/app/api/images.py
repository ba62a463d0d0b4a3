"""
Lesson image files

Endpoints:
- GET /images/{file_name} - Serve a file from settings.IMAGES_DIR
"""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from app.core.config import settings
from app.core.errors import NotFoundError

router = APIRouter()


@router.get("/images/{file_name}")
def get_image(file_name: str) -> FileResponse:
    """Serve a lesson image, or 404 if the file does not exist"""
    images_dir = Path(settings.IMAGES_DIR).resolve()
    file_path = (images_dir / file_name).resolve()

    # Names resolving outside the images directory are treated as missing
    if images_dir not in file_path.parents or not file_path.is_file():
        raise NotFoundError("Image file does not exist")

    return FileResponse(file_path)
