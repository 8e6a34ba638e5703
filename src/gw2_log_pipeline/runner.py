from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from gw2_log_pipeline.config.settings import PipelineSettings
from gw2_log_pipeline.errors import StepFailedError
from gw2_log_pipeline.io.paths import PipelinePaths

log = logging.getLogger(__name__)


def build_parser_command(settings: PipelineSettings, paths: PipelinePaths,
                         input_files: Sequence[Path]) -> list[str]:
    return [
        *settings.executable_prefix,
        str(paths.executable),
        "-c", str(paths.ei_config),
        *(str(f) for f in input_files),
    ]


def build_script_command(settings: PipelineSettings, paths: PipelinePaths) -> list[str]:
    return [settings.python, str(paths.parser_script), str(paths.logs_dir)]


def run_step(name: str, cmd: list[str], cwd: Path | None = None, check: bool = True) -> int:
    """
    Run one external step and block until it exits.

    Output is inherited from this process, not captured. A process that
    cannot be started always raises StepFailedError; a non-zero exit code
    raises only when ``check`` is set, otherwise it is logged and returned.
    """
    log.info("Running %s: %s", name, " ".join(cmd))
    try:
        proc = subprocess.run(cmd, cwd=str(cwd) if cwd else None)
    except OSError as exc:
        raise StepFailedError(name, f"Could not start {name}: {exc}") from exc

    rc = int(proc.returncode)
    if rc != 0:
        if check:
            raise StepFailedError(name, f"{name} exited with code {rc}", returncode=rc)
        log.warning("%s exited with code %s, continuing", name, rc)
    else:
        log.info("%s finished", name)
    return rc
