"""
DESCRIPTION
-----------
layout_loader reads an optional YAML layout contract and returns the dist layout keys.
Without a contract the verifier uses DEFAULT_CONTRACT; a contract only overrides the keys it names.

Example:
  dist_dir: build
  entry_file: index.html
  assets_dir: static
  script_suffix: .mjs
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from dist_verifier.errors import LayoutContractError
from dist_verifier.validator.error_codes import INVALID_LAYOUT_CONTRACT
from dist_verifier.validator.schema_validator import format_issues, validate_schema

logger = logging.getLogger(__name__)


DEFAULT_CONTRACT: Dict[str, str] = {
    "dist_dir": "dist",
    "entry_file": "index.html",
    "assets_dir": "assets",
    "script_suffix": ".js",
}

_NON_EMPTY_STRING = {"type": "string", "minLength": 1}

LAYOUT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {key: _NON_EMPTY_STRING for key in DEFAULT_CONTRACT},
    "additionalProperties": False,
}


#note: Load and validate a layout contract (invalid contracts are a hard error).
def load_layout_contract(path: Union[str, Path]) -> Dict[str, str]:
    contract_path = Path(path)
    if not contract_path.is_file():
        raise LayoutContractError(
            code=INVALID_LAYOUT_CONTRACT,
            message=f"Missing layout contract at {contract_path}",
        )

    try:
        raw = yaml.safe_load(contract_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise LayoutContractError(
            code=INVALID_LAYOUT_CONTRACT,
            message=f"Unreadable layout contract at {contract_path}: {exc}",
        ) from exc

    #note: An empty file means "all defaults".
    if raw is None:
        raw = {}

    issues = validate_schema(raw, LAYOUT_SCHEMA)
    if issues:
        raise LayoutContractError(
            code=INVALID_LAYOUT_CONTRACT,
            message=f"Invalid layout contract at {contract_path}: {format_issues(issues)}",
            issues=[str(issue) for issue in issues],
        )

    contract = dict(DEFAULT_CONTRACT)
    contract.update(raw)
    logger.debug("Loaded layout contract from %s: %s", contract_path, contract)
    return contract
