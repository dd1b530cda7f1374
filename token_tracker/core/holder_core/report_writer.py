from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from .constants import DEFAULT_REPORT_DIR, REPORT_PREFIX
from .errors import ReportWriteFailed
from .models import RunReport


def iso_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def report_filename(timestamp: str) -> str:
    """``token-report-2024-05-01T12-30-00-123Z.json``; sorts chronologically."""
    safe = timestamp.replace(":", "-").replace(".", "-")
    return f"{REPORT_PREFIX}-{safe}.json"


class ReportWriter:
    def __init__(self, output_dir: Union[str, Path] = DEFAULT_REPORT_DIR) -> None:
        self.output_dir = Path(output_dir)

    def path_for(self, report: RunReport) -> Path:
        return self.output_dir / report_filename(report.timestamp)

    def write(self, report: RunReport) -> Path:
        path = self.path_for(report)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as fh:
                json.dump(report.to_json_dict(), fh, indent=2)
        except OSError as exc:
            raise ReportWriteFailed(str(path), str(exc), report=report) from exc
        return path
