"""
This module provides validation utilities for N-body initial states.

The SimulationValidator class offers static methods to check state validity (positive
masses, finite values, correct dimensions) and to fail fast with a ConfigurationError that
names the first offending body. The checks run once at setup so that a bad body never
reaches the force loop, where a zero mass would divide and a NaN would spread silently
through every frame.
"""

from __future__ import annotations
import math
from typing import Optional, Sequence, Tuple
import numpy as np

from .errors import ConfigurationError




Vec2 = Tuple[float, float]


class SimulationValidator:
	@staticmethod
	def find_problem(
		masses: Sequence[float],
		positions: Sequence[Vec2],
		velocities: Sequence[Vec2],
	) -> Optional[str]:
		if masses is None or positions is None or velocities is None:
			return "masses, positions and velocities are all required"

		if not len(masses) == len(positions) == len(velocities):
			return (f"length mismatch: {len(masses)} masses, {len(positions)} positions, "
					f"{len(velocities)} velocities")

		for i, m in enumerate(masses):
			m = float(m)
			if not math.isfinite(m):
				return f"body {i}: mass must be finite, got {m!r}"
			if not m > 0.0:
				return f"body {i}: mass must be positive, got {m!r}"

		for label, pairs in (("position", positions), ("velocity", velocities)):
			for i, pair in enumerate(pairs):
				if len(pair) != 2:
					return f"body {i}: {label} has {len(pair)} dimensions (expected 2)"
				if not (math.isfinite(float(pair[0])) and math.isfinite(float(pair[1]))):
					return f"body {i}: {label} must be finite, got {tuple(pair)!r}"

		return None

	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions: Sequence[Vec2],
		velocities: Sequence[Vec2],
	) -> bool:
		return SimulationValidator.find_problem(masses, positions, velocities) is None

	@staticmethod
	def require_valid_state(
		masses: Sequence[float],
		positions: Sequence[Vec2],
		velocities: Sequence[Vec2],
	) -> None:
		problem = SimulationValidator.find_problem(masses, positions, velocities)
		if problem is not None:
			raise ConfigurationError(f"invalid initial state: {problem}")

	@staticmethod
	def arrays_are_finite(*arrays: np.ndarray) -> bool:
		return all(bool(np.all(np.isfinite(a))) for a in arrays)
