from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import pytest

from gw2_log_pipeline.config.settings import PipelineSettings


FAKE_EI = """
import sys
from pathlib import Path

args = sys.argv[1:]
with open(Path(__file__).parent / "calls.txt", "a", encoding="utf-8") as f:
    f.write("\\n".join(args) + "\\n")

for name in args[2:]:
    Path(name).with_suffix(".json").write_text("{{}}", encoding="utf-8")

sys.exit({exit_code})
"""

FAKE_TOP_STATS = """
import sys
from pathlib import Path

logs = Path(sys.argv[1])
for p in sorted(logs.glob("*.json")):
    (logs / (p.stem + ".tid")).write_text("title: " + p.stem, encoding="utf-8")

html = Path(__file__).parent / "example_output" / "TW5_Top_Stat_Parse.html"
html.parent.mkdir(parents=True, exist_ok=True)
html.write_text("<html></html>", encoding="utf-8")

sys.exit({exit_code})
"""


def build_project(root: Path, recordings=("wvw_1.zevtc", "wvw_2.zevtc"),
                  ei_exit: int = 0, script_exit: int = 0) -> PipelineSettings:
    (root / "GW2EI").mkdir(parents=True)
    (root / "GW2EI" / "fake_ei.py").write_text(FAKE_EI.format(exit_code=ei_exit), encoding="utf-8")

    (root / "config").mkdir()
    (root / "config" / "EIP.conf").write_text("SaveOutJSON=true\n", encoding="utf-8")

    (root / "parser").mkdir()
    (root / "parser" / "fake_top_stats.py").write_text(
        FAKE_TOP_STATS.format(exit_code=script_exit), encoding="utf-8"
    )

    (root / "logs").mkdir()
    for name in recordings:
        (root / "logs" / name).write_bytes(b"EVTC")

    return replace(
        PipelineSettings(),
        executable="GW2EI/fake_ei.py",
        executable_prefix=(sys.executable,),
        parser_script="parser/fake_top_stats.py",
        python=sys.executable,
        open_results=False,
    )


@pytest.fixture
def make_project(tmp_path: Path):
    def _make(**kwargs) -> tuple[Path, PipelineSettings]:
        root = tmp_path / "project"
        return root, build_project(root, **kwargs)

    return _make


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in saved:
            h.close()
    for h in saved:
        root.addHandler(h)
    root.setLevel(level)
