"""
Tabular views of probe results (pandas).

  • probe_frame    long form, one row per (function, width)
  • max_ulp_table  function × width pivot of max_ulp, widths in bit order
"""

from __future__ import annotations
from dataclasses import asdict
from typing import Iterable
import pandas as pd

from realmath.accuracy.probe import ProbeResult
from realmath.widths import WIDTHS


COLUMNS = ["function", "width", "samples", "max_ulp", "mean_ulp", "worst_input"]


def probe_frame(results: Iterable[ProbeResult]) -> pd.DataFrame:
	rows = [asdict(r) for r in results]
	return pd.DataFrame(rows, columns=COLUMNS)


def max_ulp_table(df: pd.DataFrame) -> pd.DataFrame:
	"""Pivot `probe_frame` output into function rows and width columns."""
	table = df.pivot(index="function", columns="width", values="max_ulp")
	order = [w.name for w in WIDTHS if w.name in table.columns]
	table = table[order]
	table.columns.name = None
	return table
