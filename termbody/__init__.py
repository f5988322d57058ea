"""
This initialization file serves as the main entry point for the termbody package, an
N-body gravity simulation rendered as ASCII art in a terminal, exposing the public API
through a clean namespace.

It imports and re-exports the configuration (SimConfig), the error types, the body
containers (Body, BodyView), the array state and its per-step PositionSnapshot, the force
pass (GravitySolver and its functional forms), the semi-implicit Euler Integrator, the
FrameBuffer rasterizer, the renderer sinks, the fixed-step SimulationClock and run loop,
the NBodySimulation facade, diagnostics, and the galaxy generator used to seed runs.
"""

from .errors import TermbodyError, ConfigurationError
from .sim_config import SimConfig

from .body import Body
from .body_view import BodyView
from .simulation_state import SimulationState, PositionSnapshot
from .simulation_validator import SimulationValidator
from .forces import GravitySolver, accumulate_gravity, gravitational_force, pairwise_force
from .integrator import Integrator
from .frame_buffer import FrameBuffer
from .renderer import RendererSink, TerminalSink, RecordingSink
from .simulation_clock import SimulationClock
from .simulation import NBodySimulation
from .runner import run
from .diagnostics import Diagnostics
from .galaxy import GalaxyConfig, create_galaxy, get_orbit_speed, two_galaxy_scene

__version__ = "0.1.0"
