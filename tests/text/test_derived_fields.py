from __future__ import annotations

import pytest

from runwayscreening.text import (
    contact_handle,
    display_name,
    format_size_mb,
    has_allowed_extension,
    role_title,
    slugify,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Senior Backend Engineer. Requires 5+ years Go experience.", "Senior Backend Engineer"),
        ("Data Scientist\nWe are hiring. Join us.", "Data Scientist"),
        ("  Product Designer  ", "Product Designer"),
        ("", "Position"),
        (". starts with a period", "Position"),
        ("\nsecond line only", "Position"),
    ],
)
def test_role_title(text: str, expected: str):
    assert role_title(text) == expected


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("jane-doe.pdf", "jane doe"),
        ("john_smith.pdf", "john smith"),
        ("Mary_Ann-Lee.DOCX", "Mary Ann Lee"),
        ("resume.v2.txt", "resume.v2"),
        ("no_extension", "no extension"),
        (".pdf", ""),
    ],
)
def test_display_name(file_name: str, expected: str):
    assert display_name(file_name) == expected


def test_contact_handle_collapses_whitespace():
    assert contact_handle("Jane  Doe") == "jane.doe@email.com"
    assert contact_handle("john smith", domain="example.org") == "john.smith@example.org"


def test_slugify():
    assert slugify("Senior Backend Engineer") == "senior-backend-engineer"
    assert slugify("  Lead   QA\tEngineer ") == "lead-qa-engineer"


def test_format_size_mb():
    assert format_size_mb(0) == "0.00 MB"
    assert format_size_mb(10 * 1024 * 1024) == "10.00 MB"


def test_has_allowed_extension_is_case_insensitive():
    extensions = (".pdf", ".doc", ".docx", ".txt")

    assert has_allowed_extension("CV.PDF", extensions)
    assert has_allowed_extension("cv.Docx", extensions)
    assert not has_allowed_extension("cv.png", extensions)
    assert not has_allowed_extension("pdf", extensions)
