from __future__ import annotations
from dataclasses import dataclass, replace
import math
import numbers
import numpy as np

from .errors import ConfigurationError

"""
This central configuration module defines all simulation and rendering parameters through the SimConfig dataclass. Key parameters include the gravitational constant, the fixed timestep, the character grid size, the vertical squish applied to terminal cells, the density factor and glyph ramp used for luminance, and the two force filters (Manhattan proximity skip and source mass cutoff). The class provides copy and replace helpers for deriving variants and a validate method that raises ConfigurationError on unusable values. It serves as the single source of truth passed explicitly to the solver, integrator and rasterizer, so several simulations with different settings can coexist in one process.

"""

@dataclass
class SimConfig:
	G: float = 0.02
	delta_time: float = 1.0 / 60.0
	time_speed: float = 1.0
	screen_w: int = 150
	screen_h: int = 45
	y_squish: float = 0.6
	density_factor: float = 0.9
	luminance: str = ".,:ilw@"
	proximity_threshold: float = 1.0
	mass_cutoff: float | None = 100.0
	fast_float32: bool = False

	@property
	def dtype(self):
		return np.float32 if self.fast_float32 else np.float64

	@property
	def luminance_count(self) -> int:
		return len(self.luminance)

	def copy(self) -> "SimConfig":
		new = object.__new__(SimConfig)
		new.__dict__ = dict(getattr(self, "__dict__", {}))
		return new

	def replace(self, **changes) -> "SimConfig":
		return replace(self, **changes)

	def validate(self) -> "SimConfig":
		if not math.isfinite(float(self.G)):
			raise ConfigurationError(f"G must be finite, got {self.G!r}")

		dt = float(self.delta_time)
		if not math.isfinite(dt) or dt <= 0.0:
			raise ConfigurationError(f"delta_time must be a positive finite number, got {self.delta_time!r}")

		if not (math.isfinite(float(self.time_speed)) and self.time_speed > 0.0):
			raise ConfigurationError(f"time_speed must be positive, got {self.time_speed!r}")

		for name in ("screen_w", "screen_h"):
			val = getattr(self, name)
			if isinstance(val, bool) or not isinstance(val, numbers.Integral) or val <= 0:
				raise ConfigurationError(f"{name} must be a positive integer, got {val!r}")

		if not (0.0 < float(self.y_squish) <= 1.0):
			raise ConfigurationError(f"y_squish must lie in (0, 1], got {self.y_squish!r}")

		if not (math.isfinite(float(self.density_factor)) and self.density_factor > 0.0):
			raise ConfigurationError(f"density_factor must be positive, got {self.density_factor!r}")

		if not self.luminance:
			raise ConfigurationError("luminance ramp must hold at least one glyph")
		for glyph in self.luminance:
			if len(glyph) != 1:
				raise ConfigurationError(f"luminance glyphs must be single characters, got {glyph!r}")

		if not (float(self.proximity_threshold) >= 0.0):
			raise ConfigurationError(
				f"proximity_threshold must be non-negative, got {self.proximity_threshold!r}"
			)

		if self.mass_cutoff is not None and not (float(self.mass_cutoff) >= 0.0):
			raise ConfigurationError(f"mass_cutoff must be non-negative, got {self.mass_cutoff!r}")

		return self
