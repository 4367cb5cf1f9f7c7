"""
DESCRIPTION
-----------
Failure types raised by the dist checks.
Every VerificationError is fatal to the run; main() turns it into one stderr line
and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence


class VerificationError(Exception):
    """Base class for every gate failure."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class MissingArtifactError(VerificationError):
    def __init__(self, code: str, message: str, path: Path) -> None:
        super().__init__(code, message)
        self.path = path


class LayoutContractError(VerificationError):
    def __init__(self, code: str, message: str, issues: Sequence[str] = ()) -> None:
        super().__init__(code, message)
        self.issues: List[str] = list(issues)
