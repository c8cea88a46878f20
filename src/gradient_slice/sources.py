"""Load source sequences from files for the command line tools."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, List, Sequence

import pandas as pd

_SUFFIX_FORMATS = {
    ".json": "json",
    ".jsonl": "jsonl",
    ".csv": "csv",
    ".bin": "bytes",
}


def detect_format(path: str | Path) -> str:
    return _SUFFIX_FORMATS.get(Path(path).suffix.lower(), "text")


def parse_hex(text: str) -> bytes:
    """Parse ``"1BADB002"``, ``"0x1badb002"`` or ``"1b ad b0 02"`` into bytes."""

    cleaned = re.sub(r"\s+", "", text)
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise ValueError(f"Invalid hex string: {text!r}") from exc


def _load_jsonl(path: Path, value_column: str | None) -> List[Any]:
    values: list[Any] = []
    for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        if not line.strip():
            continue
        try:
            obj = json.loads(line)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}:{lineno}: invalid JSON line") from exc
        if isinstance(obj, dict):
            if not value_column or value_column not in obj:
                raise ValueError(f"{path}:{lineno}: object without value column {value_column!r}")
            obj = obj[value_column]
        values.append(obj)
    return values


def load_source(path: str | Path, source_format: str = "auto", value_column: str | None = None) -> Sequence[Any]:
    """Load a sequence from text, raw bytes, a JSON list, JSONL or a CSV column."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")

    if source_format == "auto":
        source_format = detect_format(path)

    if source_format == "text":
        return path.read_text(encoding="utf-8")
    if source_format == "bytes":
        return path.read_bytes()
    if source_format == "json":
        loaded = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(loaded, list):
            raise ValueError("JSON source file must contain a list")
        return loaded
    if source_format == "jsonl":
        return _load_jsonl(path, value_column)
    if source_format == "csv":
        df = pd.read_csv(path)
        if df.columns.empty:
            raise ValueError(f"CSV source file has no columns: {path}")
        if value_column is None:
            value_column = df.columns[0]
        if value_column not in df.columns:
            raise ValueError(f"Column {value_column!r} not found in {path}")
        return df[value_column].tolist()
    raise ValueError(f"Unknown source format: {source_format}")
