"""Tests for stackshift.analyzers.framework."""

from __future__ import annotations

import logging

import pytest

from stackshift.analyzers.framework import (
    ManifestError,
    detect_framework,
    detect_frameworks,
    load_manifest_dependencies,
)
from stackshift.models import FileRecord


def _files(*names: str) -> list[FileRecord]:
    return [
        FileRecord(file_name=name, extension="", language="Other", size=1, lines=1, path=name)
        for name in names
    ]


def test_manifest_dependencies_are_merged() -> None:
    manifest = """
    {
      "dependencies": {"express": "4"},
      "devDependencies": {"jest": "29"},
      "peerDependencies": {"react": "18"},
      "optionalDependencies": {"fsevents": "2"},
      "scripts": {"start": "node index.js"}
    }
    """
    assert load_manifest_dependencies(manifest) == {"express", "jest", "react"}


@pytest.mark.parametrize("text", ["{broken", "[]", "42"])
def test_manifest_errors(text: str) -> None:
    with pytest.raises(ManifestError):
        load_manifest_dependencies(text)


def test_manifest_wins_over_file_names() -> None:
    manifest = '{"dependencies": {"express": "4.18.0"}}'
    files = _files("App.vue")
    assert detect_frameworks(files, manifest) == ["Node.js", "Vue.js"]
    assert detect_framework(files, manifest) == "Node.js"


def test_table_order_breaks_ties_within_manifest() -> None:
    manifest = '{"dependencies": {"react-native": "0.72", "react": "18"}}'
    # "react" is a substring of "react-native", so React is listed first.
    assert detect_framework([], manifest) == "React"


@pytest.mark.parametrize(
    ("names", "expected"),
    [
        (("pubspec.yaml", "main.dart"), "Flutter"),
        (("Podfile", "AppDelegate.swift"), "iOS"),
        (("build.gradle", "MainActivity.kt"), "Android"),
        (("manage.py", "requirements.txt"), "Django"),
        (("composer.json", "index.php"), "Laravel"),
        (("main.c", "util.h"), "Unknown"),
    ],
)
def test_file_name_evidence(names: tuple[str, ...], expected: str) -> None:
    assert detect_framework(_files(*names)) == expected


def test_file_names_are_compared_lower_cased() -> None:
    assert detect_framework(_files("Angular.json")) == "Angular"


def test_invalid_manifest_logs_warning_and_continues(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="stackshift"):
        result = detect_framework(_files("App.vue"), "{ not json")
    assert result == "Vue.js"
    assert "Failed to parse dependency manifest" in caplog.text


def test_no_evidence_is_unknown() -> None:
    assert detect_framework([]) == "Unknown"
    assert detect_framework([], '{"dependencies": {"lodash": "4"}}') == "Unknown"


def test_manifest_with_byte_order_mark_is_parsed() -> None:
    manifest = "\ufeff" + '{"dependencies": {"@angular/core": "17"}}'
    assert load_manifest_dependencies(manifest) == {"@angular/core"}
    assert detect_framework(_files("main.ts"), manifest) == "Angular"
