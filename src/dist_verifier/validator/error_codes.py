from __future__ import annotations


MISSING_DIST_DIRECTORY = "missing_dist_directory"
MISSING_ENTRY_FILE = "missing_entry_file"
MISSING_BUNDLED_SCRIPT = "missing_bundled_script"

INVALID_LAYOUT_CONTRACT = "invalid_layout_contract"
