from __future__ import annotations

import logging
import os
from pathlib import Path

from dist_verifier.errors import MissingArtifactError

logger = logging.getLogger(__name__)


def ensure_exists(path: Path, description: str, code: str) -> None:
    """Raises MissingArtifactError unless path exists and is accessible."""
    logger.debug("Checking %s at %s", description, path)
    if not os.access(path, os.F_OK):
        raise MissingArtifactError(
            code=code,
            message=f"Missing {description} at {path}",
            path=path,
        )
