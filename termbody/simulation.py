"""
This module implements NBodySimulation, the facade that owns the body arrays, the force
pass, the integrator and the frame.

One call to step is a strict barrier sequence: capture a PositionSnapshot, accumulate
every pairwise force against it, integrate every body (kick, drift, force reset), then
rasterize the snapshot into the frame. The frame therefore shows where the bodies were at
the start of the step, not where integration left them. render hands the frame's glyph
grid to a sink and clear_frame empties it for the next step. Setup validates the
configuration and every initial body up front and raises ConfigurationError instead of
letting a zero mass or a degenerate grid turn into NaN frames later. Bodies may be
appended only until the first step; the collection is fixed for the rest of the run.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from .errors import ConfigurationError
from .sim_config import SimConfig
from .simulation_state import PositionSnapshot, SimulationState
from .simulation_validator import SimulationValidator
from .body_view import BodyView
from .forces import GravitySolver
from .integrator import Integrator, check_delta
from .frame_buffer import FrameBuffer
from .renderer import RendererSink


logger = logging.getLogger(__name__)


class NBodySimulation:

	def __init__(self, cfg: Optional[SimConfig] = None, bodies: Optional[Iterable] = None) -> None:
		self.cfg = (cfg or SimConfig()).copy()
		self.cfg.validate()

		self.state = SimulationState.from_config(self.cfg)
		self.solver = GravitySolver(self.cfg)
		self.integrator = Integrator(self.state)
		self.frame = FrameBuffer(self.cfg)
		self._warned_nonfinite = False

		if bodies is not None:
			self.initialize(bodies)

	def initialize(self, bodies: Iterable) -> "NBodySimulation":
		self.cfg.validate()
		self.state = SimulationState.from_config(self.cfg)
		self.state.build_state(list(bodies))
		self.integrator = Integrator(self.state)
		self.frame = FrameBuffer(self.cfg)
		self._warned_nonfinite = False

		logger.debug(
			"initialized %d bodies on a %dx%d frame (G=%g, dt=%g)",
			self.state.n_bodies, self.cfg.screen_w, self.cfg.screen_h,
			self.cfg.G, self.cfg.delta_time,
		)
		return self

	def add_body(self, body) -> BodyView:
		if self.integrator.steps > 0:
			raise ConfigurationError("bodies can only be added before the first step")
		self.state.append(body)
		return self.state.view(self.state.n_bodies - 1)

	@property
	def n_bodies(self) -> int:
		return self.state.n_bodies

	@property
	def G(self) -> float:
		return float(self.cfg.G)

	@property
	def bodies(self) -> List[BodyView]:
		return self.state.views()

	@property
	def steps_taken(self) -> int:
		return self.integrator.steps

	def step(self, delta_time: Optional[float] = None) -> PositionSnapshot:
		dt = check_delta(self.cfg.delta_time if delta_time is None else delta_time)

		snapshot = self.state.snapshot()
		self.solver.accumulate(self.state, snapshot)
		self.integrator.step(dt)
		self.frame.draw_snapshot(snapshot)

		if not self._warned_nonfinite and not SimulationValidator.arrays_are_finite(
			self.state.pos, self.state.vel
		):
			logger.warning("body state became non-finite after step %d", self.steps_taken)
			self._warned_nonfinite = True

		return snapshot

	def render(self, sink: RendererSink) -> None:
		sink.consume(self.frame.to_grid())

	def clear_frame(self) -> None:
		self.frame.clear()

	def __repr__(self) -> str:
		return f"NBodySimulation(n_bodies={self.n_bodies}, steps={self.steps_taken})"
