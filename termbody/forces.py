"""
This module implements the gravitational force pass of one simulation step.

The accumulate_gravity function takes the step's PositionSnapshot and adds, for every
ordered pair (i, j) with i != j, the Newtonian pull of body j on body i into i's force
accumulator. Two policy filters decide which pairs contribute. Pairs whose Manhattan
distance |dx| + |dy| is at or below the proximity threshold are skipped; this is a coarse
guard against the near-singular force of almost coincident bodies, not a softening
length, and it changes the visible dynamics if altered. Sources lighter than the mass
cutoff are ignored so that a galaxy of light stars only feels its heavy cores. The pass
is the plain O(n^2) sum, vectorized with numpy over the full (n, n) pair matrix, and
accumulation order does not affect the result beyond float rounding. pairwise_force is
the scalar form of a single pair, used as the reference for the vectorized kernel.
"""

from __future__ import annotations
import math
from typing import Optional, Tuple, TYPE_CHECKING
import numpy as np
from .geometry_cache import geometry_buffers

if TYPE_CHECKING:
	from .sim_config import SimConfig
	from .simulation_state import PositionSnapshot, SimulationState




def pairwise_force(
	xi: float, yi: float, mi: float,
	xj: float, yj: float, mj: float,
	G: float,
	proximity_threshold: float = 1.0,
) -> Tuple[float, float]:
	dx = xj - xi
	dy = yj - yi
	if abs(dx) + abs(dy) <= proximity_threshold:
		return 0.0, 0.0

	r = math.sqrt(dx * dx + dy * dy)
	magnitude = G * mi * mj / (r * r)
	return magnitude * dx / r, magnitude * dy / r


def pair_mask(
	manhattan: np.ndarray,
	mass: np.ndarray,
	proximity_threshold: float,
	mass_cutoff: Optional[float],
) -> np.ndarray:
	mask = manhattan > proximity_threshold
	if mass_cutoff:
		mask &= (mass >= mass_cutoff)[None, :]
	np.fill_diagonal(mask, False)
	return mask


def gravitational_force(
	pos: np.ndarray,
	mass: np.ndarray,
	G: float,
	proximity_threshold: float = 1.0,
	mass_cutoff: Optional[float] = None,
) -> np.ndarray:
	pos = np.asarray(pos)
	mass = np.asarray(mass)
	n = int(mass.shape[0])

	if n < 2 or G == 0.0:
		return np.zeros((n, 2), dtype=pos.dtype)

	diff, r2, manhattan = geometry_buffers(pos)
	mask = pair_mask(manhattan, mass, proximity_threshold, mass_cutoff)

	# G m_i m_j / r^2 along d / r, zero wherever the pair is filtered out
	coeff = np.zeros_like(r2)
	r2_m = r2[mask]
	coeff[mask] = (G * np.outer(mass, mass))[mask] / (r2_m * np.sqrt(r2_m))

	F = np.einsum("ij,ijk->ik", coeff, diff, optimize=True)
	return F.astype(pos.dtype, copy=False)


def accumulate_gravity(
	state: "SimulationState",
	snapshot: "PositionSnapshot",
	cfg: "SimConfig",
) -> None:
	if state.n_bodies == 0:
		return
	state._force += gravitational_force(
		snapshot.pos,
		snapshot.mass,
		float(cfg.G),
		proximity_threshold=float(cfg.proximity_threshold),
		mass_cutoff=cfg.mass_cutoff,
	)


class GravitySolver:
	def __init__(self, cfg: "SimConfig") -> None:
		self.cfg = cfg

	def accumulate(self, state: "SimulationState", snapshot: "PositionSnapshot") -> None:
		accumulate_gravity(state, snapshot, self.cfg)

	def forces(self, snapshot: "PositionSnapshot") -> np.ndarray:
		return gravitational_force(
			snapshot.pos,
			snapshot.mass,
			float(self.cfg.G),
			proximity_threshold=float(self.cfg.proximity_threshold),
			mass_cutoff=self.cfg.mass_cutoff,
		)
