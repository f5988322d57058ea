"""
This module implements the real-time run loop around NBodySimulation.

run advances the clock, steps the simulation by the clock's fixed delta, pushes the
frame to the sink, sleeps whatever is left of the frame budget (scaled by time_speed),
and clears the frame. Pacing only affects how fast frames appear; the physics always
advances by the same delta. sleep and monotonic are injectable so the loop can run
headless at full speed.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Optional, TYPE_CHECKING

from .errors import ConfigurationError
from .simulation_clock import SimulationClock

if TYPE_CHECKING:
	from .simulation import NBodySimulation
	from .renderer import RendererSink


logger = logging.getLogger(__name__)


def run(
	sim: "NBodySimulation",
	sink: "RendererSink",
	clock: Optional[SimulationClock] = None,
	*,
	frames: Optional[int] = None,
	time_speed: float = 1.0,
	sleep: Callable[[float], None] = time.sleep,
	monotonic: Callable[[], float] = time.monotonic,
) -> int:
	if clock is None:
		clock = SimulationClock.from_config(sim.cfg)
	if frames is not None and frames < 0:
		raise ConfigurationError(f"frames must be non-negative, got {frames!r}")
	if not time_speed > 0.0:
		raise ConfigurationError(f"time_speed must be positive, got {time_speed!r}")

	delta = clock.delta_time
	count = 0
	t_last = monotonic()

	while frames is None or count < frames:
		t_start = monotonic()

		clock.tick()
		sim.step(delta)
		sim.render(sink)

		calc_time = monotonic() - t_start
		sleep(max(delta - calc_time, 0.0) * time_speed)
		sim.clear_frame()
		count += 1

		t_now = monotonic()
		elapsed = t_now - t_last
		t_last = t_now
		if elapsed > 0.0:
			logger.debug("fps %.1f", 1.0 / elapsed)

	return count
