from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

log = logging.getLogger(__name__)

KEPT = "kept"
DISCARDED = "discarded"


@dataclass(frozen=True)
class MovedFile:
    name: str
    source: Path
    destination: Path
    category: str


def partition(files: Iterable[Path], keep_extension: str) -> tuple[list[Path], list[Path]]:
    kept: list[Path] = []
    discarded: list[Path] = []
    for f in files:
        (kept if f.name.endswith(keep_extension) else discarded).append(f)
    return kept, discarded


def _regular_files(dir_path: Path) -> list[Path]:
    return sorted(p for p in dir_path.iterdir() if p.is_file())


def move_outputs(logs_dir: Path, run_dir: Path, discard_dir: Path, keep_extension: str) -> list[MovedFile]:
    """
    Move kept outputs into the run folder and everything else into the
    discard folder, then delete whatever regular files are still left.

    Subdirectories of ``logs_dir`` are left alone.
    """
    kept, discarded = partition(_regular_files(logs_dir), keep_extension)

    moved: list[MovedFile] = []
    for files, target, category in ((kept, run_dir, KEPT), (discarded, discard_dir, DISCARDED)):
        for src in files:
            dst = target / src.name
            shutil.move(str(src), str(dst))
            moved.append(MovedFile(name=src.name, source=src, destination=dst, category=category))

    leftovers = _regular_files(logs_dir)
    for f in leftovers:
        f.unlink()
    if leftovers:
        log.info("Deleted %s leftover files from %s", len(leftovers), logs_dir)

    log.info("Moved %s kept and %s discarded files", len(kept), len(discarded))
    return moved
