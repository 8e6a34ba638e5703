import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from gw2_log_pipeline.logging_conf import setup_logging
from gw2_log_pipeline.config.loader import DEFAULT_CONFIG_PATH, ConfigLoadError, load_config
from gw2_log_pipeline.config.settings import PipelineSettings, settings_from_config
from gw2_log_pipeline.errors import MissingPathError
from gw2_log_pipeline.io.paths import PipelinePaths
from gw2_log_pipeline.pipeline import STATUS_NO_INPUT, preflight, run_pipeline


log = logging.getLogger(__name__)
console = Console()


def _safe_load_config(root: Path) -> dict | None:
    """
    Try to load config/pipeline.yaml under the root. If it fails, fall back to defaults (None).
    """
    try:
        return load_config(root / DEFAULT_CONFIG_PATH)
    except ConfigLoadError as exc:
        log.warning("Pipeline config not loaded, using defaults: %s", exc)
        return None


def load_settings(root: Path, config: str | None) -> PipelineSettings:
    # an explicitly requested config must load; the default one is optional
    if config:
        cfg = load_config(Path(config) if Path(config).is_absolute() else root / config)
    else:
        cfg = _safe_load_config(root)
    return settings_from_config(cfg)


def cmd_check(paths: PipelinePaths, settings: PipelineSettings) -> int:
    inputs = preflight(paths, settings)
    console.print("[green]OK[/green] required files present:")
    for p in paths.required():
        console.print(f" - {escape(str(p))}")
    console.print(f"{len(inputs)} {escape(settings.input_extension)} files in {escape(str(paths.logs_dir))}")
    for p in inputs:
        console.print(f" - {escape(p.name)}")
    return 0


def cmd_run(paths: PipelinePaths, settings: PipelineSettings, open_viewers: bool) -> int:
    # the run log goes next to the run folders, never into the input folder
    setup_logging(log_dir=paths.done_root)

    result = run_pipeline(paths, settings, open_viewers=open_viewers)

    keep_ext = escape(settings.keep_extension)
    if result.status == STATUS_NO_INPUT:
        console.print(f"No {escape(settings.input_extension)} files found in the logs directory.")
        return 0

    console.print("[green]OK[/green] run complete:")
    console.print(f" - run folder: {escape(str(result.run_dir))}")
    console.print(f" - recordings parsed: {len(result.input_files)}")
    console.print(f" - kept {keep_ext} files: {len(result.kept)}")
    console.print(f" - discarded files: {len(result.moved) - len(result.kept)}")
    console.print(f" - manifest: {escape(str(result.manifest_path))}")
    console.print(f" - run report: {escape(str(result.report_path))}")
    if result.browser_opened:
        console.print(f"File Explorer has been opened with {keep_ext} files selected.")
    if result.results_opened:
        console.print("HTML output has been opened in the default web browser.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gw2_log_pipeline",
        description="Parse arcdps recordings with GW2EI, run the top stats script and file the results",
    )
    p.add_argument("--root", type=str, default=".", help="project folder holding GW2EI/, config/, logs/, parser/")
    p.add_argument("--config", type=str, default=None, help=f"YAML settings (default: {DEFAULT_CONFIG_PATH} if present)")
    p.add_argument("--no-open", action="store_true", help="do not open the file browser or the results page")
    p.add_argument("--check", action="store_true", help="only validate paths and list recordings")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging()
        root = Path(args.root).resolve()
        if not root.is_dir():
            raise MissingPathError(root)

        settings = load_settings(root, args.config)
        paths = PipelinePaths.from_settings(settings, root=root)
        if args.check:
            return cmd_check(paths, settings)
        return cmd_run(paths, settings, open_viewers=not args.no_open)
    except Exception as exc:
        # errors never change the exit status
        log.error("Run aborted: %s", exc)
        console.print(f"[red]An error occurred:[/red] {escape(str(exc))}")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
