"""JSON output — deterministic result.json and run-metadata.json generation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import BaseModel


def render_json(result: BaseModel, out_path: Path) -> Path:
    """Write result.json with camelCase keys and return the written path."""
    data = result.model_dump(mode="json", by_alias=True)
    return _write(data, out_path, "result.json")


def write_run_metadata(meta: dict[str, str], out_path: Path) -> Path:
    """Write run-metadata.json to *out_path* and return the written path."""
    return _write(meta, out_path, "run-metadata.json")


def _write(data: object, out_path: Path, name: str) -> Path:
    out_dir = Path(out_path)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / name
    out_file.write_text(
        json.dumps(data, sort_keys=True, indent=2) + "\n",
        encoding="utf-8",
    )
    return out_file
