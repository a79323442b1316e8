from __future__ import annotations
from typing import Dict
import logging

from realmath.bindings.base import FloatBinding, LogGammaBinding
from realmath.config import PlatformConfig
from realmath.errors import UnsupportedWidthError
from realmath.native import REQUIRED_ROUTINES, NativeRoutines
from realmath.widths import FloatWidth


logger = logging.getLogger(__name__)


def build_binding(width: FloatWidth, log_gamma: bool = True) -> type:
	"""
	Build the binding class for `width` (named Float16, Float32, ...).

	The class conforms to LogGammaFunctions only when `log_gamma` is enabled
	and the native library has an exact log-gamma loop for the width. Raises
	UnsupportedWidthError when any routine Real needs has no native loop.
	"""
	exclude = ()
	if not log_gamma:
		exclude = ("lgamma",)
	native = NativeRoutines(width, exclude=exclude)
	missing = native.missing(REQUIRED_ROUTINES)
	if missing:
		raise UnsupportedWidthError(f"{width.name}: no native routine for {', '.join(missing)}")

	bases: tuple = (FloatBinding,)
	if native.has("lgamma"):
		bases = (FloatBinding, LogGammaBinding)
	namespace = {
		"__module__": "realmath.bindings",
		"__qualname__": width.binding_name,
		"__doc__": f"Real elementary functions on {width.name} ({width.bits}-bit) scalars.",
		"width": width,
		"native": native,
	}
	cls = type(FloatBinding)(width.binding_name, bases, namespace)
	if len(bases) == 1:
		logger.debug("bound %s without log-gamma", width.name)
	else:
		logger.debug("bound %s", width.name)
	return cls


def build_bindings(config: PlatformConfig) -> Dict[FloatWidth, type]:
	"""
	Build one binding per configured width, in the config's order. A width the
	native library cannot fully serve is left out with a warning.
	"""
	out: Dict[FloatWidth, type] = {}
	for w in config.widths:
		try:
			out[w] = build_binding(w, log_gamma=config.log_gamma)
		except UnsupportedWidthError as exc:
			logger.warning("skipping %s: %s", w.name, exc)
	return out
