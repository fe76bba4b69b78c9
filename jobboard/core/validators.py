"""
core/validators.py
------------------
Input guards applied before any authorization or database call.
"""

import re

from jobboard.core.errors import InvalidInputError

# Shape only (8-4-4-4-12); version/variant nibbles are not checked so that
# fixture ids like "bbbbbbbb-bbbb-..." pass.
_UUID_LOOSE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


def is_uuid(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return bool(_UUID_LOOSE.match(value.strip()))


def require_uuid(value: object, field: str = "id") -> str:
    """Return the trimmed, lower-cased id or raise InvalidInputError."""
    if not is_uuid(value):
        raise InvalidInputError(f"Invalid {field}")
    return value.strip().lower()  # type: ignore[union-attr]


def optional_uuid(value: object, field: str = "id") -> str | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_uuid(value, field)


def normalize_slug(value: str) -> str:
    slug = value.strip().lower()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w.\-()+\s]")


def sanitize_filename(name: str) -> str:
    """Drop any directory part and replace unusual characters with '_'."""
    base = name.replace("\\", "/").split("/")[-1] or "file"
    return _UNSAFE_FILENAME_CHARS.sub("_", base)


def file_extension(name: str) -> str:
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()
