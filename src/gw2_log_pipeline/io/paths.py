from __future__ import annotations
import random
from dataclasses import dataclass
from pathlib import Path
from datetime import datetime

from gw2_log_pipeline.config.settings import PipelineSettings
from gw2_log_pipeline.errors import MissingPathError, PipelineError

RUN_SUFFIX_MIN = 100000
RUN_SUFFIX_MAX = 999999


def run_folder_name(now: datetime | None = None, rng: random.Random | None = None) -> str:
    """Return a run folder name like ``101926_482913`` (MMddyy + 6 random digits)."""
    now = now or datetime.now()
    rng = rng or random
    return f"{now.strftime('%m%d%y')}_{rng.randint(RUN_SUFFIX_MIN, RUN_SUFFIX_MAX)}"


def unique_run_dir(done_root: Path, now: datetime | None = None,
                   rng: random.Random | None = None, attempts: int = 100) -> Path:
    for _ in range(attempts):
        cand = done_root / run_folder_name(now, rng)
        if not cand.exists():
            return cand
    raise PipelineError(f"Could not pick an unused run folder under {done_root}")


@dataclass(frozen=True)
class PipelinePaths:
    root: Path
    executable: Path
    ei_config: Path
    logs_dir: Path
    parser_script: Path
    results_html: Path
    done_root: Path
    run_dir: Path
    discard_dir_name: str = "useless"

    @classmethod
    def from_settings(cls, settings: PipelineSettings, root: Path | str | None = None,
                      now: datetime | None = None, rng: random.Random | None = None) -> "PipelinePaths":
        base = (Path(root) if root is not None else Path.cwd()).resolve()
        done_root = base / settings.done_dir
        return cls(
            root=base,
            executable=base / settings.executable,
            ei_config=base / settings.ei_config,
            logs_dir=base / settings.logs_dir,
            parser_script=base / settings.parser_script,
            results_html=base / settings.results_html,
            done_root=done_root,
            run_dir=unique_run_dir(done_root, now, rng),
            discard_dir_name=settings.discard_dir_name,
        )

    @property
    def discard_dir(self) -> Path:
        return self.run_dir / self.discard_dir_name

    def required(self) -> tuple[Path, ...]:
        return (self.executable, self.ei_config, self.logs_dir, self.parser_script)

    def ensure_run_dirs(self) -> None:
        self.run_dir.mkdir(parents=True, exist_ok=True)
        self.discard_dir.mkdir(parents=True, exist_ok=True)


def validate_required(*paths: Path) -> None:
    """Raise MissingPathError for the first path that is neither a directory nor a file."""
    for path in paths:
        if path.is_dir():
            continue
        if not path.is_file():
            raise MissingPathError(path)


def find_input_files(logs_dir: Path, extension: str) -> list[Path]:
    ext = extension.lower()
    return sorted(p for p in logs_dir.iterdir() if p.is_file() and p.name.lower().endswith(ext))
