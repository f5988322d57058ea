"""
This module implements the character-grid frame that body positions are rasterized into.

The FrameBuffer class holds two fixed (screen_h, screen_w) row-major numpy grids: an
occupied mask and an unsigned density counter. A world position (x, y) is drawable when
0 < x < screen_w and 0 < y * y_squish < screen_h, both bounds exclusive; anything else is
skipped without clamping or wraparound. A drawable body marks cell (floor(y * y_squish),
floor(x)) occupied and adds floor(mass) to its density, so bodies lighter than one still
light a cell without brightening it, and crowded cells grow brighter. One body adds at
most the u32 maximum and the counter itself is 64-bit, so it never wraps within a frame.
Glyph selection maps an occupied cell's density through
index = clamp(floor(density * density_factor), 0, L - 1) into the luminance ramp;
unoccupied cells are blank. The y_squish factor compensates for
terminal cells being taller than they are wide. clear resets both grids and must run once
per frame after the frame has been handed to a sink.
"""

from __future__ import annotations
import logging
from typing import List, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
	from .sim_config import SimConfig
	from .simulation_state import PositionSnapshot


logger = logging.getLogger(__name__)

BLANK = " "

# a single body contributes at most this much density
WEIGHT_MAX = int(np.iinfo(np.uint32).max)


class FrameBuffer:

	def __init__(self, cfg: "SimConfig") -> None:
		self.cfg = cfg
		self.width = int(cfg.screen_w)
		self.height = int(cfg.screen_h)
		self.y_squish = float(cfg.y_squish)
		self.density_factor = float(cfg.density_factor)
		self._glyphs = np.array(list(cfg.luminance))

		self.occupied = np.zeros((self.height, self.width), dtype=bool)
		self.density = np.zeros((self.height, self.width), dtype=np.uint64)

	@property
	def shape(self):
		return (self.height, self.width)

	def is_drawable(self, x: float, y: float) -> bool:
		return (
			x > 0.0 and x < float(self.width)
			and y > 0.0 and y * self.y_squish < float(self.height)
		)

	def draw_position(self, x: float, y: float, mass: float) -> bool:
		if not self.is_drawable(x, y):
			return False

		x_idx = int(np.floor(x))
		y_idx = int(np.floor(y * self.y_squish))

		self.occupied[y_idx, x_idx] = True
		self.density[y_idx, x_idx] += self.mass_weight(mass)
		return True

	def draw_snapshot(self, snapshot: "PositionSnapshot") -> int:
		if len(snapshot) == 0:
			return 0

		x = np.asarray(snapshot.x, dtype=np.float64)
		y_sq = np.asarray(snapshot.y, dtype=np.float64) * self.y_squish
		y = np.asarray(snapshot.y, dtype=np.float64)

		# NaN positions fail every comparison and fall out here
		ok = (x > 0.0) & (x < self.width) & (y > 0.0) & (y_sq < self.height)
		n_drawn = int(np.count_nonzero(ok))
		if n_drawn:
			xi = np.floor(x[ok]).astype(np.intp)
			yi = np.floor(y_sq[ok]).astype(np.intp)
			weight = self.mass_weight(np.asarray(snapshot.mass, dtype=np.float64)[ok])

			self.occupied[yi, xi] = True
			np.add.at(self.density, (yi, xi), weight)

		skipped = len(snapshot) - n_drawn
		if skipped:
			logger.debug("%d of %d bodies outside the frame", skipped, len(snapshot))
		return n_drawn

	def mass_weight(self, mass):
		w = np.clip(np.floor(mass), 0, WEIGHT_MAX)
		return w.astype(np.uint64)

	def luminance_index(self, density) -> np.ndarray:
		L = len(self._glyphs)
		scaled = np.floor(np.asarray(density, dtype=np.float64) * self.density_factor)
		return np.clip(scaled, 0, L - 1).astype(np.intp)

	def glyph_grid(self) -> np.ndarray:
		glyphs = self._glyphs[self.luminance_index(self.density)]
		return np.where(self.occupied, glyphs, BLANK)

	def to_grid(self) -> List[List[str]]:
		return self.glyph_grid().tolist()

	def to_lines(self) -> List[str]:
		return ["".join(row) for row in self.to_grid()]

	def is_empty(self) -> bool:
		return not self.occupied.any()

	def clear(self) -> None:
		self.occupied[...] = False
		self.density[...] = 0
