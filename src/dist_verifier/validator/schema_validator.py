"""Draft 7 checks for layout contracts; issues are addressed by JSON path ($.key)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from jsonschema import Draft7Validator


@dataclass(frozen=True)
class SchemaIssue:
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def _json_path(parts: Any) -> str:
    return "$" + "".join(f"[{p}]" if isinstance(p, int) else f".{p}" for p in parts)


def validate_schema(payload: Any, schema: Dict[str, Any]) -> List[SchemaIssue]:
    """Returns every schema violation in payload; an empty list means valid."""
    validator = Draft7Validator(schema)
    return [
        SchemaIssue(path=_json_path(error.absolute_path), message=error.message)
        for error in validator.iter_errors(payload)
    ]


def format_issues(issues: List[SchemaIssue]) -> str:
    return "; ".join(str(issue) for issue in issues)
