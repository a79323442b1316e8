"""
Accuracy report runner: probe every bound width against the SymPy reference and
print the max-ULP table; optionally write the long-form CSV.

CLI:
	python -m realmath.runners.accuracy_report --samples 64 --widths float32,float64 --out ulp.csv
"""

from __future__ import annotations
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from realmath.accuracy import UlpProbe, known_functions, max_ulp_table, probe_frame
from realmath.bindings import BINDINGS
from realmath.widths import width_named


logger = logging.getLogger(__name__)


def _split(text: str) -> List[str]:
	out: List[str] = []
	for token in text.split(","):
		token = token.strip()
		if token:
			out.append(token)
	return out


def select_bindings(widths_arg: str) -> List[type]:
	"""Bindings named in `widths_arg` (all bound widths when empty)."""
	if not widths_arg:
		return list(BINDINGS.values())
	chosen = []
	for name in _split(widths_arg):
		w = width_named(name)
		if w not in BINDINGS:
			logger.warning("%s is not bound on this platform; skipped", w.name)
			continue
		chosen.append(BINDINGS[w])
	return chosen


def select_functions(functions_arg: str) -> Optional[List[str]]:
	if not functions_arg:
		return None
	names = _split(functions_arg)
	known = known_functions()
	unknown = [n for n in names if n not in known]
	if unknown:
		raise ValueError(f"unknown function(s): {', '.join(unknown)}")
	return names


def main(argv: Optional[List[str]] = None) -> None:
	"""
	CLI entry point for the accuracy report.
	"""
	p = argparse.ArgumentParser(description="ULP accuracy report for realmath bindings")
	p.add_argument("--samples", type=int, default=64)
	p.add_argument("--seed", type=int, default=1729)
	p.add_argument("--digits", type=int, default=40)
	p.add_argument("--widths", type=str, default="")
	p.add_argument("--functions", type=str, default="")
	p.add_argument("--out", type=str, default="")
	p.add_argument("-v", "--verbose", action="store_true")
	args = p.parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

	bindings = select_bindings(args.widths)
	names = select_functions(args.functions)
	probe = UlpProbe(n=int(args.samples), seed=int(args.seed), digits=int(args.digits))
	logger.info("probing %d width(s) with %d samples per function", len(bindings), probe.n)

	df = probe_frame(probe.run_all(bindings, names))
	print(max_ulp_table(df).to_string(float_format=lambda v: f"{v:.2f}"))

	if args.out:
		out = Path(args.out).resolve()
		out.parent.mkdir(parents=True, exist_ok=True)
		df.to_csv(out, index=False)
		print(f"[realmath] wrote {len(df)} rows to {out}")


if __name__ == "__main__":
	main()
