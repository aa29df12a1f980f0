"""Machine-readable report rendering."""

from __future__ import annotations

import json
from typing import TextIO

from ..validate import Report


def render_json(report: Report) -> str:
    return json.dumps(report.to_dict(), ensure_ascii=False, indent=2)


def write_json(report: Report, stream: TextIO) -> None:
    stream.write(render_json(report))
    stream.write("\n")


__all__ = ["render_json", "write_json"]
