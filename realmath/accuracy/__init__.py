"""
Accuracy probing (production package)

Public API re-export:
	UlpProbe, ProbeResult: seeded ULP-error probe of bindings vs SymPy
	evaluate, exact: high-precision reference evaluation
	probe_frame, max_ulp_table: pandas views of probe results
"""

from .probe import DOMAINS, ProbeResult, UlpProbe, known_functions
from .reference import REFERENCE, evaluate, exact
from .report import max_ulp_table, probe_frame

__all__ = [
	"DOMAINS", "ProbeResult", "UlpProbe", "known_functions",
	"REFERENCE", "evaluate", "exact",
	"max_ulp_table", "probe_frame",
]
