"""Helper utilities for constructing temporary projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

ASSUMPTIONS_TEMPLATE = """
# Project Assumptions

## How to Use This File
Record assumptions as they are made.

### Current Assumptions
{body}

## Assumption Template
```
- Assumption: ...
```
"""


class ProjectBuilder:
    """Utility for writing source files and knowledge documents into a throwaway project."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def knowledge(self, documents: Mapping[str, str], directory: str = ".project") -> None:
        """Write knowledge documents (e.g. ``architecture.md``) under ``directory``."""
        self.write({f"{directory}/{name}": content for name, content in documents.items()})

    def assumptions(self, body: str, directory: str = ".project") -> None:
        """Write an assumptions.md wrapping ``body`` in the usual template."""
        content = ASSUMPTIONS_TEMPLATE.format(body=textwrap.dedent(body).strip())
        self.knowledge({"assumptions.md": content}, directory=directory)

    def read(self, relative: str) -> str:
        with (self.root / relative).open(encoding="utf-8", newline="") as handle:
            return handle.read()

    def path(self) -> Path:
        """Return the project root path."""
        return self.root


__all__ = ["ASSUMPTIONS_TEMPLATE", "ProjectBuilder"]
