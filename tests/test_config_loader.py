from __future__ import annotations

from pathlib import Path

import pytest

from gw2_log_pipeline.config.loader import load_config, ConfigLoadError


def test_load_config_success(tmp_path: Path):
    cfg = tmp_path / "pipeline.yaml"
    cfg.write_text(
        """
executable: GW2EI/GuildWars2EliteInsights.exe
executable_prefix: [wine]
keep_extension: .tid
fail_on_nonzero_exit: false
""".strip(),
        encoding="utf-8",
    )

    data = load_config(cfg)
    assert isinstance(data, dict)
    assert data["executable"] == "GW2EI/GuildWars2EliteInsights.exe"
    assert data["executable_prefix"] == ["wine"]
    assert data["keep_extension"] == ".tid"
    assert data["fail_on_nonzero_exit"] is False


def test_load_config_comments_only_is_empty_mapping(tmp_path: Path):
    cfg = tmp_path / "pipeline.yaml"
    cfg.write_text("# logs_dir: logs\n", encoding="utf-8")

    assert load_config(cfg) == {}


def test_load_config_missing_file_raises(tmp_path: Path):
    missing = tmp_path / "nope.yaml"
    with pytest.raises(ConfigLoadError) as exc:
        load_config(missing)
    assert "Pipeline config not found" in str(exc.value)


def test_load_config_invalid_yaml_raises(tmp_path: Path):
    cfg = tmp_path / "bad.yaml"
    # YAML parse error (unbalanced bracket)
    cfg.write_text("executable_prefix: [wine", encoding="utf-8")

    with pytest.raises(ConfigLoadError) as exc:
        load_config(cfg)
    assert "Failed to load pipeline config" in str(exc.value)


def test_load_config_non_mapping_raises(tmp_path: Path):
    cfg = tmp_path / "list.yaml"
    cfg.write_text("- 1\n- 2\n- 3\n", encoding="utf-8")

    with pytest.raises(ConfigLoadError) as exc:
        load_config(cfg)
    assert "must be a YAML mapping" in str(exc.value)
