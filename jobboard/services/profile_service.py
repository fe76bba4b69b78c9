"""
services/profile_service.py
---------------------------
Resume / cv uploads to the caller's own applicant profile.

Files land at <user_id>/<kind>/<epoch millis>_<filename>, so a user can
only ever write under their own prefix. An upload replaces only the path
of its own kind; the other document is left alone.
"""

import os
import time
from typing import BinaryIO

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.policy import FILE_KINDS
from jobboard.core.config import settings
from jobboard.core.errors import InvalidInputError
from jobboard.core.logging import get_logger
from jobboard.core.storage import object_store
from jobboard.core.validators import file_extension, sanitize_filename
from jobboard.models.user import Applicant, User
from jobboard.services.user_service import UserService

logger = get_logger(__name__)

ALLOWED_EXTENSIONS = frozenset({"pdf", "docx", "xlsx"})
ALLOWED_CONTENT_TYPES = frozenset(
    {
        "application/pdf",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    }
)


def _size_of(source: BinaryIO) -> int:
    source.seek(0, os.SEEK_END)
    size = source.tell()
    source.seek(0)
    return size


def document_path(user_id: str, kind: str, filename: str) -> str:
    return f"{user_id}/{kind}/{int(time.time() * 1000)}_{filename}"


class ProfileService:

    @staticmethod
    async def save_document(
        db: AsyncSession, user: User, kind: str, upload: UploadFile
    ) -> str:
        """Store the file, point the profile at it and return the storage path."""
        if kind not in FILE_KINDS:
            raise InvalidInputError("kind must be resume or cv")

        filename = sanitize_filename(upload.filename or "file")
        if file_extension(filename) not in ALLOWED_EXTENSIONS:
            raise InvalidInputError("Invalid file type. Allowed: pdf, docx, xlsx")
        # Some clients send no content type at all; only a present one is checked.
        if upload.content_type and upload.content_type not in ALLOWED_CONTENT_TYPES:
            raise InvalidInputError(f"Invalid content type: {upload.content_type}")
        if _size_of(upload.file) > settings.UPLOAD_MAX_BYTES:
            raise InvalidInputError("File too large")

        path = document_path(user.id, kind, filename)
        await run_in_threadpool(object_store.put, path, upload.file)

        applicant = await UserService.get_applicant(db, user.id)
        if applicant is None:
            applicant = Applicant(
                id=user.id, display_name=user.email.split("@")[0], email=user.email
            )
            db.add(applicant)
        if kind == "resume":
            applicant.resume_path = path
        else:
            applicant.cv_path = path
        await db.flush()

        logger.info("Document uploaded", user_id=user.id, kind=kind, path=path)
        return path
