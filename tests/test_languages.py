"""Tests for stackshift.languages."""

from __future__ import annotations

import pytest

from stackshift.languages import (
    LANGUAGE_BY_EXTENSION,
    classify_language,
    count_code_lines,
    file_extension,
)


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("App.tsx", "TypeScript"),
        ("index.JS", "JavaScript"),
        ("styles.css", "CSS"),
        ("main.dart", "Dart"),
        ("service.py", "Python"),
        ("Program.cs", "C#"),
        ("config.yml", "YAML"),
        ("archive.tar.gz", "Other"),
        ("Makefile", "Other"),
        ("notes.", "Other"),
    ],
)
def test_classify_language_uses_last_extension(file_name: str, expected: str) -> None:
    assert classify_language(file_name) == expected


def test_classify_language_is_pure() -> None:
    first = [classify_language(f"file{ext}") for ext in LANGUAGE_BY_EXTENSION]
    classify_language("unrelated.unknown")
    second = [classify_language(f"file{ext}") for ext in reversed(list(LANGUAGE_BY_EXTENSION))]
    assert first == list(reversed(second))


def test_language_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        LANGUAGE_BY_EXTENSION[".new"] = "New"  # type: ignore[index]


def test_file_extension_is_lower_cased() -> None:
    assert file_extension("Component.TSX") == ".tsx"
    assert file_extension("LICENSE") == ""


def test_count_code_lines_ignores_blank_and_comment_lines() -> None:
    text = "\n".join(
        [
            "// header",
            "import React from 'react';",
            "",
            "/* block",
            " * continued",
            " */",
            "# shell style",
            "export default App;",
        ]
    )
    assert count_code_lines(text) == 2


def test_count_code_lines_reports_at_least_one_for_comment_only_files() -> None:
    assert count_code_lines("// a\n// b") == 1


def test_count_code_lines_is_zero_for_empty_text() -> None:
    assert count_code_lines("") == 0
