from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from gw2_log_pipeline.config.settings import PipelineSettings
from gw2_log_pipeline.io.paths import PipelinePaths, find_input_files, validate_required
from gw2_log_pipeline.organize import KEPT, MovedFile, move_outputs
from gw2_log_pipeline.report.manifest import (
    build_manifest,
    category_counts,
    write_manifest,
    write_run_report,
)
from gw2_log_pipeline.runner import build_parser_command, build_script_command, run_step
from gw2_log_pipeline.viewer import open_results, reveal_files

log = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_NO_INPUT = "no_input"

PARSER_STEP = "GW2EI parser"
SCRIPT_STEP = "top stats script"


@dataclass
class RunResult:
    run_dir: Path
    input_files: list[Path] = field(default_factory=list)
    status: str = STATUS_OK
    parser_returncode: int | None = None
    script_returncode: int | None = None
    moved: list[MovedFile] = field(default_factory=list)
    manifest_path: Path | None = None
    report_path: Path | None = None
    browser_opened: bool = False
    results_opened: bool = False

    @property
    def kept(self) -> list[MovedFile]:
        return [m for m in self.moved if m.category == KEPT]


def preflight(paths: PipelinePaths, settings: PipelineSettings) -> list[Path]:
    """Validate required paths and list input recordings without touching the filesystem."""
    validate_required(*paths.required())
    return find_input_files(paths.logs_dir, settings.input_extension)


def result_to_dict(result: RunResult, manifest_counts: dict | None = None) -> dict:
    return {
        "status": result.status,
        "run_dir": str(result.run_dir),
        "input_files": [str(p) for p in result.input_files],
        "parser_returncode": result.parser_returncode,
        "script_returncode": result.script_returncode,
        "moved": manifest_counts or {},
        "manifest": str(result.manifest_path) if result.manifest_path else None,
    }


def run_pipeline(
    paths: PipelinePaths,
    settings: PipelineSettings,
    open_viewers: bool = True,
    file_opener: Callable[[list[str]], object] | None = None,
    html_opener: Callable[[str], object] | None = None,
) -> RunResult:
    """
    End-to-end run:
      1) create run folder + discard folder
      2) validate required paths, list recordings (stop if none)
      3) GW2EI parser -> top stats script (blocking)
      4) move kept / discarded files, write manifest + run report
      5) open file browser and results page

    Any failure propagates; files already moved stay where they are.
    """
    paths.ensure_run_dirs()
    log.info("Run folder: %s", paths.run_dir)

    validate_required(*paths.required())

    inputs = find_input_files(paths.logs_dir, settings.input_extension)
    result = RunResult(run_dir=paths.run_dir, input_files=inputs)
    if not inputs:
        log.info("No %s files in %s", settings.input_extension, paths.logs_dir)
        result.status = STATUS_NO_INPUT
        return result

    log.info("Found %s recordings", len(inputs))
    check = settings.fail_on_nonzero_exit

    result.parser_returncode = run_step(
        PARSER_STEP, build_parser_command(settings, paths, inputs), cwd=paths.root, check=check
    )
    result.script_returncode = run_step(
        SCRIPT_STEP, build_script_command(settings, paths), cwd=paths.root, check=check
    )

    result.moved = move_outputs(paths.logs_dir, paths.run_dir, paths.discard_dir, settings.keep_extension)

    manifest = build_manifest(result.moved)
    result.manifest_path = write_manifest(manifest, paths.run_dir)
    result.report_path, _ = write_run_report(
        result_to_dict(result, category_counts(manifest)), paths.done_root
    )

    if open_viewers and settings.open_results:
        result.browser_opened = reveal_files(
            paths.run_dir, f"*{settings.keep_extension}", opener=file_opener
        )
        result.results_opened = open_results(paths.results_html, opener=html_opener)

    return result
