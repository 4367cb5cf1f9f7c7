"""Validator helpers for dist presence, asset and layout-contract checks."""

from dist_verifier.validator.asset_validator import ensure_bundled_script, has_bundled_script, list_assets
from dist_verifier.validator.presence_validator import ensure_exists
from dist_verifier.validator.schema_validator import SchemaIssue, format_issues, validate_schema

__all__ = [
    "SchemaIssue",
    "ensure_bundled_script",
    "ensure_exists",
    "format_issues",
    "has_bundled_script",
    "list_assets",
    "validate_schema",
]
