"""
core/storage.py
---------------
Applicant document storage.

LocalObjectStore writes uploads under STORAGE_ROOT/<bucket>/<path>.
SignedUrlIssuer mints a short-lived, signed link the store can verify.
*Whether* a file may be written or linked is decided in
jobboard.access.policy (authorize_profile_file and
authorize_application_file) and the applicant services.
"""

import shutil
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import BinaryIO
from urllib.parse import quote

from jose import jwt

from jobboard.core.config import settings


class SignedUrlIssuer:

    def __init__(
        self,
        base_url: str = settings.STORAGE_BASE_URL,
        bucket: str = settings.STORAGE_BUCKET,
        expires_in: int = settings.SIGNED_URL_EXPIRES_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.bucket = bucket
        self.expires_in = expires_in

    def issue(self, path: str) -> str:
        expire = datetime.now(timezone.utc) + timedelta(seconds=self.expires_in)
        token = jwt.encode(
            {"bucket": self.bucket, "path": path, "exp": expire},
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )
        return f"{self.base_url}/{self.bucket}/{quote(path)}?token={token}"


class LocalObjectStore:

    def __init__(
        self, root: str = settings.STORAGE_ROOT, bucket: str = settings.STORAGE_BUCKET
    ) -> None:
        self.root = Path(root)
        self.bucket = bucket

    def locate(self, path: str) -> Path:
        target = (self.root / self.bucket / path).resolve()
        if not target.is_relative_to((self.root / self.bucket).resolve()):
            raise ValueError(f"Path escapes the bucket: {path}")
        return target

    def put(self, path: str, source: BinaryIO) -> Path:
        """Copy `source` to `path`. Blocking; call through a threadpool."""
        dst = self.locate(path)
        dst.parent.mkdir(parents=True, exist_ok=True)
        with dst.open("wb") as f:
            shutil.copyfileobj(source, f)
        return dst


signed_url_issuer = SignedUrlIssuer()
object_store = LocalObjectStore()
