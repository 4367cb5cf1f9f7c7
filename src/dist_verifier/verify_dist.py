"""
    DESCRIPTION
    -----------
    verify_dist is the CLI entrypoint for the post-build dist gate.

Responsibilities:
- Resolve the dist layout under the working directory (or --root)
- Check, in order: dist directory, then entry file, then a bundled script in assets
- Print the asset listing on success, or exactly one diagnostic line on failure
- Never mutate the filesystem; the first failing check decides the exit status
    """

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from dist_verifier.errors import VerificationError
from dist_verifier.layout import DistLayout
from dist_verifier.layout_loader import load_layout_contract
from dist_verifier.logger import configure_logging
from dist_verifier.validator.asset_validator import ensure_bundled_script, list_assets
from dist_verifier.validator.error_codes import MISSING_DIST_DIRECTORY, MISSING_ENTRY_FILE
from dist_verifier.validator.presence_validator import ensure_exists

logger = logging.getLogger(__name__)

REPORT_HEADER = "Prebuilt dist assets detected:"


@dataclass(frozen=True)
class DistReport:
    dist_dir: Path
    entry_path: Path
    assets_dir: Path
    assets: List[str]


#note: Run every check in order; the first failure raises and short-circuits the rest.
def verify_dist(layout: DistLayout) -> DistReport:
    """
    #note: Headless entrypoint for tests and other tooling.
    """
    ensure_exists(layout.dist_dir, layout.dist_description, MISSING_DIST_DIRECTORY)
    ensure_exists(layout.entry_path, layout.entry_description, MISSING_ENTRY_FILE)

    assets = list_assets(layout.assets_dir)
    ensure_bundled_script(assets, layout.script_suffix, layout.missing_script_message, layout.assets_dir)

    logger.debug("All dist checks passed for %s", layout.dist_dir)
    return DistReport(
        dist_dir=layout.dist_dir,
        entry_path=layout.entry_path,
        assets_dir=layout.assets_dir,
        assets=assets,
    )


#note: Undecodable filename bytes are shown as \xNN escapes so any stdout encoding can print them.
def _display_name(name: str) -> str:
    return os.fsencode(name).decode("utf-8", "backslashreplace")


def format_report(report: DistReport) -> List[str]:
    return [REPORT_HEADER] + [f"  - {_display_name(asset)}" for asset in report.assets]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verify-dist",
        description="Fail the pipeline unless the build emitted dist/index.html and bundled JavaScript in dist/assets.",
    )
    parser.add_argument("--root", dest="root", required=False, help="Directory containing dist/ (default: current directory).")
    parser.add_argument("--layout", dest="layout", required=False, help="YAML layout contract overriding the dist/entry/assets names.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Trace each check on stderr.")
    return parser


#note: CLI entrypoint (verify-dist, python -m dist_verifier, scripts/verify_dist.py).
def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        contract = load_layout_contract(args.layout) if args.layout else None
        layout = DistLayout.create(root=Path(args.root) if args.root else None, contract=contract)
        report = verify_dist(layout)
    except VerificationError as exc:
        logger.debug("Verification failed with %s", exc.code)
        print(exc.message, file=sys.stderr)
        return 1

    for line in format_report(report):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
