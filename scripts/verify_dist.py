#!/usr/bin/env python3
"""Post-build gate: run from the build root after the bundler has written dist/."""
from __future__ import annotations

from dist_verifier.verify_dist import main


if __name__ == "__main__":
    raise SystemExit(main())
