from __future__ import annotations

import logging
import subprocess
import sys
import webbrowser
from pathlib import Path
from typing import Callable

log = logging.getLogger(__name__)


def reveal_command(directory: Path, files: list[Path], platform: str | None = None) -> list[str]:
    platform = platform or sys.platform
    if platform.startswith("win"):
        # explorer only honours a single /select target
        return ["explorer", f"/select,{files[0]}"]
    if platform == "darwin":
        return ["open", "-R", *(str(f) for f in files)]
    return ["xdg-open", str(directory)]


def reveal_files(directory: Path, pattern: str,
                 opener: Callable[[list[str]], object] | None = None,
                 platform: str | None = None) -> bool:
    """Open a file browser with the files matching ``pattern`` selected. No-op if none match."""
    files = sorted(directory.glob(pattern))
    if not files:
        log.info("No %s files in %s, not opening file browser", pattern, directory)
        return False

    opener = opener or subprocess.Popen
    opener(reveal_command(directory, files, platform))
    log.info("Opened file browser on %s (%s files)", directory, len(files))
    return True


def open_results(html_path: Path, opener: Callable[[str], object] | None = None) -> bool:
    if not html_path.is_file():
        log.warning("Results file not found, not opening: %s", html_path)
        return False

    opener = opener or webbrowser.open
    opener(html_path.resolve().as_uri())
    log.info("Opened results in default browser: %s", html_path)
    return True
