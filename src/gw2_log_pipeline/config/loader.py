from __future__ import annotations

from pathlib import Path
import yaml


DEFAULT_CONFIG_PATH = Path("config/pipeline.yaml")


class ConfigLoadError(RuntimeError):
    """Raised when the pipeline configuration cannot be loaded."""


def load_config(config_path: Path | str = DEFAULT_CONFIG_PATH) -> dict:
    """
    Load pipeline settings from a YAML configuration file.

    Parameters
    ----------
    config_path : Path | str
        Path to the YAML config file (default: config/pipeline.yaml)

    Returns
    -------
    dict
        Parsed configuration mapping. An empty file yields an empty dict.

    Raises
    ------
    ConfigLoadError
        If the file does not exist, cannot be parsed or is not a mapping.
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigLoadError(f"Pipeline config not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except Exception as exc:
        raise ConfigLoadError(f"Failed to load pipeline config: {path}") from exc

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigLoadError("Pipeline config must be a YAML mapping (dict)")

    return data
