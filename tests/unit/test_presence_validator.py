from __future__ import annotations

from pathlib import Path

import pytest

from dist_verifier.errors import MissingArtifactError, VerificationError
from dist_verifier.validator.error_codes import MISSING_DIST_DIRECTORY, MISSING_ENTRY_FILE
from dist_verifier.validator.presence_validator import ensure_exists


def test_ensure_exists_accepts_directory_and_file(tmp_path: Path) -> None:
    html = tmp_path / "index.html"
    html.write_text("<html></html>", encoding="utf-8")

    ensure_exists(tmp_path, "dist directory", MISSING_DIST_DIRECTORY)
    ensure_exists(html, "dist/index.html", MISSING_ENTRY_FILE)


def test_ensure_exists_reports_description_and_path(tmp_path: Path) -> None:
    missing = tmp_path / "dist"

    with pytest.raises(MissingArtifactError) as excinfo:
        ensure_exists(missing, "dist directory", MISSING_DIST_DIRECTORY)

    err = excinfo.value
    assert isinstance(err, VerificationError)
    assert err.code == MISSING_DIST_DIRECTORY
    assert err.path == missing
    assert err.message == f"Missing dist directory at {missing}"
    assert str(err) == err.message
