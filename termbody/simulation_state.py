"""
This module manages the internal state representation for the N-body simulation.

The SimulationState class maintains contiguous numpy arrays for masses, positions,
velocities and the per-body force accumulator, builds them from a sequence of initial
bodies, and hands out BodyView proxies for per-body access. PositionSnapshot is the
frozen per-step capture of positions and masses: forces for the whole step are computed
against it (a synchronized update, every body sees the same pre-integration
configuration) and the rasterizer draws from it after integration has moved the bodies.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, TYPE_CHECKING
import numpy as np

from .body import Body
from .body_view import BodyView
from .simulation_validator import SimulationValidator

if TYPE_CHECKING:
	from .sim_config import SimConfig




@dataclass(frozen=True, eq=False)
class PositionSnapshot:
	pos: np.ndarray
	mass: np.ndarray

	def __len__(self) -> int:
		return int(self.mass.shape[0])

	def __iter__(self) -> Iterator[Tuple[float, float, float]]:
		for (x, y), m in zip(self.pos.tolist(), self.mass.tolist()):
			yield (x, y, m)

	@property
	def x(self) -> np.ndarray:
		return self.pos[:, 0]

	@property
	def y(self) -> np.ndarray:
		return self.pos[:, 1]


def _as_body(item) -> Body:
	if isinstance(item, Body):
		return item
	if isinstance(item, BodyView):
		return Body(item.mass, item.x, item.y, item.vx, item.vy)
	return Body.from_mapping(item)


class SimulationState:

	def __init__(self, dtype=np.float64):
		self.dtype = np.dtype(dtype)
		self.n_bodies: int = 0
		self._mass: np.ndarray = np.empty(0, dtype=self.dtype)
		self._pos: np.ndarray = np.empty((0, 2), dtype=self.dtype)
		self._vel: np.ndarray = np.empty((0, 2), dtype=self.dtype)
		self._force: np.ndarray = np.empty((0, 2), dtype=self.dtype)

	@classmethod
	def from_config(cls, cfg: "SimConfig") -> "SimulationState":
		return cls(dtype=cfg.dtype)

	@property
	def pos(self) -> np.ndarray:
		return self._pos

	@property
	def vel(self) -> np.ndarray:
		return self._vel

	@property
	def mass(self) -> np.ndarray:
		return self._mass

	@property
	def force(self) -> np.ndarray:
		return self._force

	def build_state(self, bodies: Sequence) -> None:
		packed = [_as_body(b) for b in bodies]
		masses = [b.mass for b in packed]
		positions = [(b.x, b.y) for b in packed]
		velocities = [(b.vx, b.vy) for b in packed]

		SimulationValidator.require_valid_state(masses, positions, velocities)

		self.n_bodies = len(packed)
		self._mass = np.asarray(masses, dtype=self.dtype).reshape(-1)
		self._pos = np.asarray(positions, dtype=self.dtype).reshape(-1, 2)
		self._vel = np.asarray(velocities, dtype=self.dtype).reshape(-1, 2)
		self._force = np.zeros((self.n_bodies, 2), dtype=self.dtype)

	def append(self, body) -> None:
		body = _as_body(body)
		SimulationValidator.require_valid_state(
			[body.mass], [(body.x, body.y)], [(body.vx, body.vy)]
		)
		self._mass = np.append(self._mass, np.asarray([body.mass], dtype=self.dtype))
		self._pos = np.vstack([self._pos, np.asarray([[body.x, body.y]], dtype=self.dtype)])
		self._vel = np.vstack([self._vel, np.asarray([[body.vx, body.vy]], dtype=self.dtype)])
		self._force = np.vstack([self._force, np.zeros((1, 2), dtype=self.dtype)])
		self.n_bodies += 1

	def snapshot(self) -> PositionSnapshot:
		pos = self._pos.copy()
		mass = self._mass.copy()
		pos.setflags(write=False)
		mass.setflags(write=False)
		return PositionSnapshot(pos=pos, mass=mass)

	def reset_forces(self) -> None:
		self._force[...] = 0.0

	def view(self, idx: int) -> BodyView:
		if not -self.n_bodies <= idx < self.n_bodies:
			raise IndexError(f"body index {idx} out of range for {self.n_bodies} bodies")
		return BodyView(self, idx % self.n_bodies)

	def views(self) -> List[BodyView]:
		return [BodyView(self, i) for i in range(self.n_bodies)]

	def to_bodies(self) -> List[Body]:
		return [
			Body(m, p[0], p[1], v[0], v[1])
			for m, p, v in zip(self._mass.tolist(), self._pos.tolist(), self._vel.tolist())
		]
