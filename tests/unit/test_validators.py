"""Tests for input guards."""

import pytest

from jobboard.core.errors import InvalidInputError
from jobboard.core.validators import (
    file_extension,
    is_uuid,
    normalize_slug,
    optional_uuid,
    require_uuid,
    sanitize_filename,
)


class TestUuidGuards:
    """Tests for id validation."""

    @pytest.mark.parametrize(
        "value",
        [
            "bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb",
            "3F2504E0-4F89-11D3-9A0C-0305E82C3301",
            "  3f2504e0-4f89-11d3-9a0c-0305e82c3301 ",
        ],
    )
    def test_accepts_uuid_shapes(self, value: str) -> None:
        assert is_uuid(value) is True

    @pytest.mark.parametrize("value", ["", "not-a-uuid", "1234", None, 42, "3f2504e04f8911d39a0c0305e82c3301"])
    def test_rejects_others(self, value) -> None:
        assert is_uuid(value) is False

    def test_require_uuid_normalizes(self) -> None:
        assert require_uuid(" 3F2504E0-4F89-11D3-9A0C-0305E82C3301 ") == (
            "3f2504e0-4f89-11d3-9a0c-0305e82c3301"
        )

    def test_require_uuid_names_field(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            require_uuid("nope", "applicationId")

        assert exc_info.value.detail == "Invalid applicationId"
        assert exc_info.value.status_code == 400

    def test_optional_uuid_blank_is_none(self) -> None:
        assert optional_uuid(None) is None
        assert optional_uuid("   ") is None

    def test_optional_uuid_still_validates(self) -> None:
        with pytest.raises(InvalidInputError):
            optional_uuid("nope")


class TestNormalizeSlug:
    """Tests for organization slugs."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Acme Corp", "acme-corp"),
            ("  --Acme__Corp!!  ", "acmecorp"),
            ("a   b--c", "a-b-c"),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_slug(raw) == expected


class TestFilenames:
    """Tests for upload filename handling."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("resume.pdf", "resume.pdf"),
            ("../../etc/passwd", "passwd"),
            ("C:\\Users\\jane\\cv (final).docx", "cv (final).docx"),
            ("r\u00e9sum\u00e9;rm.pdf", "r\u00e9sum\u00e9_rm.pdf"),
            ("dir/", "file"),
        ],
    )
    def test_sanitize(self, raw: str, expected: str) -> None:
        assert sanitize_filename(raw) == expected

    def test_extension_is_lowercased(self) -> None:
        assert file_extension("Report.Final.PDF") == "pdf"

    def test_no_extension(self) -> None:
        assert file_extension("README") == ""
