"""
DESCRIPTION
-----------
DistLayout is the single source of truth for the paths one verification run inspects.
It resolves <root>/dist, <root>/dist/index.html and <root>/dist/assets without touching
the filesystem, so the checks themselves decide what is missing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from dist_verifier.layout_loader import DEFAULT_CONTRACT


#note: Frozen so no check can redirect a path mid-run.
@dataclass(frozen=True)
class DistLayout:
    """
    #note: Holds the resolved output layout for one verification run.
    """

    root: Path
    dist_name: str
    entry_name: str
    assets_name: str
    script_suffix: str

    #note: Resolve the layout relative to root (cwd when omitted).
    @classmethod
    def create(cls, root: Optional[Path] = None, contract: Optional[Mapping[str, Any]] = None) -> "DistLayout":
        """
        #note: The canonical layout is:
          <root>/
            dist/
              index.html
              assets/
                *.js
        """
        merged = dict(DEFAULT_CONTRACT)
        merged.update(contract or {})
        return cls(
            root=Path(root if root is not None else Path.cwd()).resolve(),
            dist_name=str(merged["dist_dir"]),
            entry_name=str(merged["entry_file"]),
            assets_name=str(merged["assets_dir"]),
            script_suffix=str(merged["script_suffix"]),
        )

    @property
    def dist_dir(self) -> Path:
        return self.root / self.dist_name

    @property
    def entry_path(self) -> Path:
        return self.dist_dir / self.entry_name

    @property
    def assets_dir(self) -> Path:
        return self.dist_dir / self.assets_name

    @property
    def dist_description(self) -> str:
        return f"{self.dist_name} directory"

    @property
    def entry_description(self) -> str:
        return f"{self.dist_name}/{self.entry_name}"

    @property
    def missing_script_message(self) -> str:
        return f"{self.dist_name}/{self.assets_name} is missing bundled JavaScript output"
