"""JSON reports of a comparison run."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from .compare import Result
from .presets import ScanParams


def build_report(
    result: Result,
    *,
    params: Optional[ScanParams] = None,
    duration_ms: Optional[float] = None,
) -> Dict[str, object]:
    """Result fields, plus the scan parameters and timing when known."""
    report = result.to_dict()
    if params is not None:
        report["params"] = params.to_dict()
    if duration_ms is not None:
        report["duration_ms"] = round(duration_ms, 3)
    return report


def result_to_json(
    result: Result,
    *,
    params: Optional[ScanParams] = None,
    duration_ms: Optional[float] = None,
) -> str:
    return json.dumps(build_report(result, params=params, duration_ms=duration_ms), indent=2)


def write_json_report(
    result: Result,
    path: str | Path,
    *,
    params: Optional[ScanParams] = None,
    duration_ms: Optional[float] = None,
) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        result_to_json(result, params=params, duration_ms=duration_ms) + "\n",
        encoding="utf-8",
    )
    return out_path
