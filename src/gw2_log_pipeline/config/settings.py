from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PipelineSettings:
    executable: str = "GW2EI/GuildWars2EliteInsights.exe"
    executable_prefix: tuple[str, ...] = ()
    ei_config: str = "config/EIP.conf"
    logs_dir: str = "logs"
    parser_script: str = "parser/TW5_parse_top_stats_detailed.py"
    python: str = field(default_factory=lambda: sys.executable)
    results_html: str = "parser/example_output/TW5_Top_Stat_Parse.html"
    done_dir: str = "logsdone"
    discard_dir_name: str = "useless"
    input_extension: str = ".zevtc"
    keep_extension: str = ".tid"
    fail_on_nonzero_exit: bool = True
    open_results: bool = True


def _get_str(cfg: dict, key: str, default: str) -> str:
    value = cfg.get(key, default)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _get_bool(cfg: dict, key: str, default: bool) -> bool:
    value = cfg.get(key, default)
    if isinstance(value, bool):
        return value
    return default


def _get_str_list(cfg: dict, key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = cfg.get(key, default)
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    return default


def _normalize_ext(ext: str) -> str:
    return ext if ext.startswith(".") else f".{ext}"


def settings_from_config(cfg: dict | None) -> PipelineSettings:
    """
    Build settings from a parsed config mapping.

    Missing keys and values of the wrong type keep their defaults, so a
    partial or slightly broken config still produces a usable run.
    """
    base = PipelineSettings()
    if not isinstance(cfg, dict):
        return base

    return PipelineSettings(
        executable=_get_str(cfg, "executable", base.executable),
        executable_prefix=_get_str_list(cfg, "executable_prefix", base.executable_prefix),
        ei_config=_get_str(cfg, "ei_config", base.ei_config),
        logs_dir=_get_str(cfg, "logs_dir", base.logs_dir),
        parser_script=_get_str(cfg, "parser_script", base.parser_script),
        python=_get_str(cfg, "python", base.python),
        results_html=_get_str(cfg, "results_html", base.results_html),
        done_dir=_get_str(cfg, "done_dir", base.done_dir),
        discard_dir_name=_get_str(cfg, "discard_dir_name", base.discard_dir_name),
        input_extension=_normalize_ext(_get_str(cfg, "input_extension", base.input_extension)),
        keep_extension=_normalize_ext(_get_str(cfg, "keep_extension", base.keep_extension)),
        fail_on_nonzero_exit=_get_bool(cfg, "fail_on_nonzero_exit", base.fail_on_nonzero_exit),
        open_results=_get_bool(cfg, "open_results", base.open_results),
    )
