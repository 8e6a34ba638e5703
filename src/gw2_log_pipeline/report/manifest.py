from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable

import pandas as pd

from gw2_log_pipeline.organize import MovedFile

log = logging.getLogger(__name__)

MANIFEST_COLUMNS = ["file", "category", "source", "destination"]
MANIFEST_NAME = "manifest.csv"


def build_manifest(moved: Iterable[MovedFile]) -> pd.DataFrame:
    rows = [
        {"file": m.name, "category": m.category, "source": str(m.source), "destination": str(m.destination)}
        for m in moved
    ]
    return pd.DataFrame(rows, columns=MANIFEST_COLUMNS)


def category_counts(manifest: pd.DataFrame) -> dict:
    return {str(k): int(v) for k, v in manifest["category"].value_counts().items()}


def write_manifest(manifest: pd.DataFrame, run_dir: Path) -> Path:
    out = run_dir / MANIFEST_NAME
    manifest.to_csv(out, index=False)
    log.info("Wrote %s rows -> %s", len(manifest), out)
    return out


def write_run_report(report: dict, done_root: Path) -> tuple[Path, Path]:
    done_root.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    payload = json.dumps(report, indent=2, default=str)

    # timestamped report
    report_path = done_root / f"run_report_{stamp}.json"
    report_path.write_text(payload, encoding="utf-8")

    # latest report (idempotent)
    latest_path = done_root / "run_report_latest.json"
    latest_path.write_text(payload, encoding="utf-8")

    return report_path, latest_path
