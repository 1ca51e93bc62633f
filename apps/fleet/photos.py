import logging
import os
import uuid

from django.core.exceptions import ValidationError
from django.db import transaction

logger = logging.getLogger(__name__)

PHOTO_DIR = "uploads/cars"
PHOTO_EXTENSIONS = ["jpg", "jpeg", "png", "gif"]
PHOTO_MAX_BYTES = 5 * 1024 * 1024


def car_photo_path(instance, filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower()
    return f"{PHOTO_DIR}/{uuid.uuid4()}{ext}"


def validate_photo_size(f):
    try:
        size = f.size
    except OSError:
        # stored file vanished from disk; nothing new was uploaded
        return
    if size > PHOTO_MAX_BYTES:
        raise ValidationError("Photo must be 5 MB or smaller.")


def delete_photo(name: str, storage) -> None:
    """
    Removes a stored photo. A file that is already gone is fine.
    """
    if not name:
        return
    try:
        storage.delete(name)
    except FileNotFoundError:
        return
    logger.info("Removed car photo %s", name)


def delete_photo_on_commit(name: str, storage) -> None:
    """
    Removes the photo once the surrounding transaction commits, so a rolled
    back delete or update keeps its file.
    """
    if name:
        transaction.on_commit(lambda: delete_photo(name, storage))
