"""
Platform configuration for the binding table.

Which widths get a binding, and whether the log-gamma capability is bound at
all, are properties of the platform rather than of the numeric code. They are
detected from NumPy and may be narrowed through the environment:

  • REALMATH_WIDTHS     comma-separated width names to bind (e.g. "float32,float64")
  • REALMATH_LOG_GAMMA  "0", "false", "no" or "off" removes log_gamma/sign_gamma
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple
import logging
import os

from realmath.widths import WIDTHS, FloatWidth, width_named


logger = logging.getLogger(__name__)

WIDTHS_ENV = "REALMATH_WIDTHS"
LOG_GAMMA_ENV = "REALMATH_LOG_GAMMA"

_FALSE_WORDS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PlatformConfig:
	"""
	Immutable description of the platform's floating-point surface.
	"""
	widths: Tuple[FloatWidth, ...]
	log_gamma: bool = True

	@staticmethod
	def detect() -> "PlatformConfig":
		"""Every width whose layout is native on this machine, log-gamma enabled."""
		native = []
		for w in WIDTHS:
			if w.is_native():
				native.append(w)
		return PlatformConfig(widths=tuple(native), log_gamma=True)

	@staticmethod
	def from_env(environ: Optional[Mapping[str, str]] = None) -> "PlatformConfig":
		"""
		Detect the platform, then apply REALMATH_WIDTHS and REALMATH_LOG_GAMMA.
		Unknown width names raise ValueError; known but non-native widths are
		dropped with a warning.
		"""
		if environ is None:
			environ = os.environ
		base = PlatformConfig.detect()

		widths = base.widths
		raw = environ.get(WIDTHS_ENV, "").strip()
		if raw:
			wanted = []
			for token in raw.split(","):
				if not token.strip():
					continue
				w = width_named(token)
				if w not in base.widths:
					logger.warning("%s requests %s, which is not native on this platform; skipped", WIDTHS_ENV, w.name)
					continue
				if w not in wanted:
					wanted.append(w)
			widths = tuple(w for w in WIDTHS if w in wanted)

		log_gamma = base.log_gamma
		flag = environ.get(LOG_GAMMA_ENV, "").strip().lower()
		if flag in _FALSE_WORDS:
			log_gamma = False

		return PlatformConfig(widths=widths, log_gamma=log_gamma)

	def enabled(self, width: FloatWidth) -> bool:
		return width in self.widths
