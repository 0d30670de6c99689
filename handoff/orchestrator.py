"""Pipeline orchestration for the inject-docs flow."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .config import HandoffConfig, load_config
from .errors import (
    AllFilesUnprocessableError,
    NoKnowledgeBaseError,
    NoSourceFilesError,
    ReadFailureError,
)
from .extractors import extract_elements
from .injector import DocumentationInjector
from .knowledge import KnowledgeLoader
from .logging import get_logger
from .models import FileDescriptor, FileResult, InjectOptions, InjectOutcome, KnowledgeBase
from .reporting import Committer, Reporter
from .source_scanner import SourceScanner
from .synthesis import DocumentationSynthesizer

STATUS_REPORTED = "reported"
STATUS_WRITTEN = "written"


@dataclass
class _FileOutcome:
    """What processing a single file produced."""

    result: Optional[FileResult] = None
    unsaved: bool = False
    processable: bool = False


@dataclass
class GenerationReport:
    """Results of the extract/score/synthesize stages for a run."""

    results: List[FileResult] = field(default_factory=list)
    unsaved_files: List[str] = field(default_factory=list)
    processable_files: int = 0


class Orchestrator:
    """Coordinates scan, knowledge, synthesis and injection for a project."""

    def __init__(
        self,
        scanner: SourceScanner | None = None,
        knowledge_loader: KnowledgeLoader | None = None,
        synthesizer: DocumentationSynthesizer | None = None,
        injector: DocumentationInjector | None = None,
        reporter: Reporter | None = None,
        committer: Committer | None = None,
    ) -> None:
        self._scanner = scanner
        self._knowledge_loader = knowledge_loader
        self.synthesizer = synthesizer or DocumentationSynthesizer()
        self.injector = injector or DocumentationInjector()
        self.reporter = reporter or Reporter()
        self.committer = committer or Committer()
        self.logger = get_logger("orchestrator")

    def run_inject(self, path: str | Path, options: InjectOptions | None = None) -> InjectOutcome:
        """Generate documentation and either preview it or write it to disk."""
        options = options or InjectOptions()
        project_path = Path(path).expanduser().resolve()
        if not project_path.is_dir():
            raise FileNotFoundError(f"Project path not found: {path}")
        config = load_config(project_path)
        scanner = self._scanner or SourceScanner.from_config(config)
        loader = self._knowledge_loader or KnowledgeLoader.from_config(config)

        self.logger.info("Starting inject-docs run for %s", project_path)
        if not loader.exists(project_path):
            raise NoKnowledgeBaseError(loader.directory)

        files = scanner.scan(project_path, options.files)
        if not files:
            raise NoSourceFilesError(options.files)
        self.logger.debug("Scanner discovered %d candidate files", len(files))

        if options.language:
            self.logger.debug(
                "Language override %s noted; extraction uses each file's detected language",
                options.language,
            )

        knowledge = loader.load(project_path)
        report = self.generate(project_path, files, knowledge, config)

        if report.unsaved_files:
            self.logger.warning(
                "%d file(s) appear to be unsaved or empty: %s",
                len(report.unsaved_files),
                ", ".join(report.unsaved_files),
            )
        if report.processable_files == 0:
            raise AllFilesUnprocessableError(report.unsaved_files)

        if options.dry_run:
            preview = self.reporter.render_dry_run(report.results)
            self.logger.info("Dry-run completed; %d file(s) would change", len(report.results))
            return InjectOutcome(
                status=STATUS_REPORTED,
                results=report.results,
                unsaved_files=report.unsaved_files,
                preview=preview,
            )

        written = self.committer.commit(project_path, report.results)
        self.logger.info("Documentation injected into %d file(s)", len(written))
        return InjectOutcome(
            status=STATUS_WRITTEN,
            results=report.results,
            unsaved_files=report.unsaved_files,
            written=written,
        )

    def generate(
        self,
        root: Path,
        files: Sequence[FileDescriptor],
        knowledge: KnowledgeBase,
        config: HandoffConfig,
    ) -> GenerationReport:
        """Run extraction, synthesis and injection in memory; nothing is written."""
        knowledge_text: Optional[str] = None
        if knowledge.has_meaningful_content(config.knowledge.min_meaningful_length):
            knowledge_text = knowledge.text
        else:
            self.logger.info("Knowledge base has no meaningful content; using generic documentation")

        candidates = [descriptor for descriptor in files if descriptor.supported]
        threshold = config.inject.unsaved_threshold

        def _process(descriptor: FileDescriptor) -> _FileOutcome:
            return self.process_file(root, descriptor, knowledge_text, threshold)

        workers = min(config.inject.max_workers, len(candidates)) if candidates else 1
        if workers > 1:
            # map() yields in submission order, keeping results in scan order.
            with ThreadPoolExecutor(max_workers=workers) as executor:
                outcomes = list(executor.map(_process, candidates))
        else:
            outcomes = [_process(descriptor) for descriptor in candidates]

        report = GenerationReport()
        for descriptor, outcome in zip(candidates, outcomes):
            if outcome.unsaved:
                report.unsaved_files.append(descriptor.path)
            if outcome.processable:
                report.processable_files += 1
            if outcome.result is not None:
                report.results.append(outcome.result)
        return report

    def process_file(
        self,
        root: Path,
        descriptor: FileDescriptor,
        knowledge_text: Optional[str],
        unsaved_threshold: int,
    ) -> _FileOutcome:
        path = root / descriptor.path
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                content = handle.read()
        except UnicodeDecodeError:
            self.logger.debug("Could not decode %s as UTF-8", descriptor.path)
            return _FileOutcome(unsaved=True)
        except OSError as exc:
            raise ReadFailureError(descriptor.path, exc.strerror or str(exc)) from exc

        if not content.strip():
            return _FileOutcome(unsaved=True)

        elements = extract_elements(content, descriptor.language)
        if not elements:
            return _FileOutcome(unsaved=len(content) > unsaved_threshold)

        blocks = [
            self.synthesizer.synthesize(element, content, descriptor.language, knowledge_text)
            for element in elements
        ]
        new_content, applied = self.injector.inject(content, blocks, descriptor.language)
        self.logger.debug(
            "%s: %d elements, %d new blocks", descriptor.path, len(elements), len(applied)
        )
        if not applied:
            return _FileOutcome(processable=True)
        return _FileOutcome(
            result=FileResult(
                file=descriptor.path,
                language=descriptor.language,
                original_content=content,
                documentation=applied,
                new_content=new_content,
            ),
            processable=True,
        )


__all__ = ["GenerationReport", "Orchestrator", "STATUS_REPORTED", "STATUS_WRITTEN"]
