"""Post-build verification of a bundler's dist/ output."""

from dist_verifier.errors import LayoutContractError, MissingArtifactError, VerificationError
from dist_verifier.layout import DistLayout
from dist_verifier.verify_dist import DistReport, format_report, main, verify_dist

__all__ = [
    "DistLayout",
    "DistReport",
    "LayoutContractError",
    "MissingArtifactError",
    "VerificationError",
    "format_report",
    "main",
    "verify_dist",
]
