"""
utils/io.py

What this file does:
- Parses spreadsheet-exported CSV text into header -> value records.
- Serializes records back to CSV (every value quoted, quotes doubled).
- Small read/write helpers around both.

How it fits:
- The convert pass reads the raw spreadsheets with parse_csv and writes the
  normalized files with to_csv.
- The import migration reads the normalized files back with parse_csv.

Notes:
- The parser is deliberately lax: an unterminated quote swallows the rest of
  the line instead of raising. Values are trimmed.
- Rows must not contain raw newlines inside quotes (the spreadsheets never do).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence


def parse_line(line: str) -> List[str]:
    values: List[str] = []
    current: List[str] = []
    in_quotes = False

    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                # escaped quote
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1

    values.append("".join(current).strip())
    return values


def parse_csv(content: str) -> List[Dict[str, str]]:
    """
    Parse CSV text into a list of dicts keyed by the header row.

    - Blank lines are skipped before parsing.
    - Rows whose fields are all empty are dropped.
    - Missing trailing values map to "".
    """
    lines = [ln for ln in (content or "").split("\n") if ln.strip()]
    if not lines:
        return []

    headers = parse_line(lines[0])
    rows: List[Dict[str, str]] = []

    for line in lines[1:]:
        values = parse_line(line)
        if not any(v for v in values):
            continue

        row: Dict[str, str] = {}
        for idx, header in enumerate(headers):
            row[header] = values[idx] if idx < len(values) else ""
        rows.append(row)

    return rows


def _quote(value: Optional[object]) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def to_csv(records: Iterable[Mapping[str, object]], headers: Sequence[str]) -> str:
    out = [",".join(headers)]
    for rec in records:
        out.append(",".join(_quote(rec.get(h)) for h in headers))
    return "\n".join(out)


def read_csv_records(path: str | Path) -> List[Dict[str, str]]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")
    # utf-8-sig: spreadsheet exports sometimes carry a BOM
    return parse_csv(path.read_text(encoding="utf-8-sig"))


def write_csv_records(
    path: str | Path,
    records: Iterable[Mapping[str, object]],
    headers: Sequence[str],
) -> None:
    path = Path(path)
    path.write_text(to_csv(records, headers), encoding="utf-8")
