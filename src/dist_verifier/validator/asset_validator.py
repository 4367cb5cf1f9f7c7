"""
DESCRIPTION
-----------
asset_validator inspects the bundler's assets directory.

Policy:
- An unreadable or absent assets directory is an empty listing, never an error here.
  The script check that follows reports it.
- A bundled script is any entry whose name ends with the configured suffix (case-sensitive).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List

from dist_verifier.errors import MissingArtifactError
from dist_verifier.validator.error_codes import MISSING_BUNDLED_SCRIPT

logger = logging.getLogger(__name__)


#note: Names are returned in the order the OS enumerates them; no sorting.
def list_assets(assets_dir: Path) -> List[str]:
    try:
        names = os.listdir(assets_dir)
    except OSError as exc:
        logger.debug("Treating %s as empty: %s", assets_dir, exc)
        return []
    logger.debug("Found %d entries in %s", len(names), assets_dir)
    return names


def has_bundled_script(assets: Iterable[str], suffix: str = ".js") -> bool:
    return any(name.endswith(suffix) for name in assets)


def ensure_bundled_script(assets: Iterable[str], suffix: str, message: str, assets_dir: Path) -> None:
    if not has_bundled_script(assets, suffix):
        raise MissingArtifactError(
            code=MISSING_BUNDLED_SCRIPT,
            message=message,
            path=assets_dir,
        )
