"""Dry-run previews and write-back of documented files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader

from .errors import WriteFailureError
from .logging import get_logger
from .models import FileResult

_TEMPLATES_DIR = Path(__file__).with_name("templates")


class Reporter:
    """Renders human-readable summaries of an inject-docs run."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        directories = []
        if templates_dir is not None:
            directories.append(str(templates_dir))
        directories.append(str(_TEMPLATES_DIR))
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render_dry_run(self, results: Sequence[FileResult]) -> str:
        return self._render("dry_run.j2", results=list(results))

    def render_unsaved_warning(self, paths: Sequence[str]) -> str:
        return self._render("unsaved.j2", paths=list(paths))

    def render_commit_summary(self, results: Sequence[FileResult]) -> str:
        return self._render("commit_summary.j2", results=list(results))

    def _render(self, template_name: str, **context: object) -> str:
        template = self._env.get_template(template_name)
        return template.render(**context).rstrip() + "\n"


class Committer:
    """Writes ``new_content`` back to disk one file at a time.

    There is no transaction: a failed write leaves earlier files written.
    """

    def __init__(self) -> None:
        self.logger = get_logger("committer")

    def commit(self, root: str | Path, results: Sequence[FileResult]) -> List[str]:
        root_path = Path(root)
        written: List[str] = []
        for result in results:
            if result.new_content is None:
                continue
            target = root_path / result.file
            try:
                with target.open("w", encoding="utf-8", newline="") as handle:
                    handle.write(result.new_content)
            except OSError as exc:
                self.logger.error("Failed to write %s: %s", target, exc)
                raise WriteFailureError(result.file, str(exc), written) from exc
            written.append(result.file)
            self.logger.info("Documented %s (%d blocks)", result.file, len(result.documentation))
        return written


__all__ = ["Committer", "Reporter"]
