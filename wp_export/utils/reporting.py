"""
Console and file reporting for an export run.

A :class:`Reporter` prints messages as ``[LEVEL] message`` lines.  When it is
given a report directory, every message is also appended to ``parsing.log``
and every recoverable problem is recorded as a JSON Lines entry in
``warnings.jsonl`` so that it can be reviewed after the run.

Each :class:`~wp_export.export_tool.WordPressExportTool` owns its reporter
and hands it to the extractors.  Functions called without one use
:data:`CONSOLE`, which only prints.

The ``EVENTS`` dictionary maps warning codes to human readable messages.
Codes not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

EVENTS: Dict[str, str] = {
    "COVER_LOOKUP": "Could not process cover image",
}


class Reporter:
    def __init__(self, report_dir: Optional[str] = None) -> None:
        self.report_dir = report_dir

    def _append(self, filename: str, line: str) -> None:
        if not self.report_dir:
            return
        os.makedirs(self.report_dir, exist_ok=True)
        with open(os.path.join(self.report_dir, filename), "a", encoding="utf-8") as f:
            f.write(line)
            f.write("\n")

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        self._append("parsing.log", f"{level}: {message}")

    def report_warning(self, code: str, post_id: Any, exc: Optional[Exception] = None) -> None:
        """Record a recoverable problem for the post identified by ``post_id``.

        Parameters
        ----------
        code:
            A key identifying the kind of problem.  If ``code`` is present in
            :data:`EVENTS` its value is used as the message.
        post_id:
            The raw id of the affected post, as found in the export.
        exc:
            Optional exception that triggered the warning.  Its string
            representation is included in the record.
        """
        message = EVENTS.get(code, code)
        entry: Dict[str, Any] = {"code": code, "message": message, "post_id": post_id}
        if exc is not None:
            entry["error"] = str(exc)
        self.log_message(f"{message} for post {post_id}", level="WARNING")
        self._append("warnings.jsonl", json.dumps(entry, ensure_ascii=False))


CONSOLE = Reporter()
