"""
utils/report.py

Console helpers shared by the convert pass and the migrations.
"""

from __future__ import annotations

import sys
from typing import Mapping


def hr(ch: str = "=", n: int = 60) -> str:
  return ch * n

def print_summary(title: str, counts: Mapping[str, int], total_label: str) -> None:
  total = sum(counts.values())
  print("\n" + hr())
  print(f"✅ {title}")
  print(hr())
  print(f"\n{total_label}: {total}")
  for label, n in counts.items():
    print(f"  - {label.capitalize()}: {n}")
  print(hr() + "\n")

def print_error(msg: str) -> None:
  print(f"❌ {msg}", file=sys.stderr)
