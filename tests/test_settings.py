from __future__ import annotations

import sys

from gw2_log_pipeline.config.settings import PipelineSettings, settings_from_config


def test_defaults_when_none():
    s = settings_from_config(None)
    assert s == PipelineSettings()
    assert s.executable == "GW2EI/GuildWars2EliteInsights.exe"
    assert s.ei_config == "config/EIP.conf"
    assert s.input_extension == ".zevtc"
    assert s.keep_extension == ".tid"
    assert s.python == sys.executable
    assert s.fail_on_nonzero_exit is True


def test_values_from_config_ok():
    cfg = {
        "logs_dir": "recordings",
        "done_dir": "archive",
        "executable_prefix": ["wine"],
        "fail_on_nonzero_exit": False,
        "open_results": False,
    }
    s = settings_from_config(cfg)
    assert s.logs_dir == "recordings"
    assert s.done_dir == "archive"
    assert s.executable_prefix == ("wine",)
    assert s.fail_on_nonzero_exit is False
    assert s.open_results is False


def test_wrong_types_fall_back_to_defaults():
    cfg = {
        "logs_dir": 42,
        "executable": "   ",
        "executable_prefix": [1, 2],
        "fail_on_nonzero_exit": "no",
    }
    s = settings_from_config(cfg)
    base = PipelineSettings()
    assert s.logs_dir == base.logs_dir
    assert s.executable == base.executable
    assert s.executable_prefix == ()
    assert s.fail_on_nonzero_exit is True


def test_single_string_prefix_and_bare_extensions():
    s = settings_from_config({"executable_prefix": "mono", "input_extension": "evtc", "keep_extension": "tid"})
    assert s.executable_prefix == ("mono",)
    assert s.input_extension == ".evtc"
    assert s.keep_extension == ".tid"
