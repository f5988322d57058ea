"""
This module generates initial bodies for the simulation: disc galaxies of
light stars on circular orbits around a heavy core.

create_galaxy places one centre body carrying the galaxy's bulk velocity, then scatters
stars uniformly in radius between star_min_r and star_max_r and uniformly in angle. Each
star gets the circular orbit speed sqrt(G M / r) for its radius, directed perpendicular
to its radius vector (counter-clockwise), plus the bulk velocity. The GalaxyConfig
dataclass encapsulates the star parameters. two_galaxy_scene reproduces the default
collision of a 600-star and a 200-star galaxy. Only the core's pull is accounted for in
the orbit speed, which is exact when the stars are lighter than the force pass's mass
cutoff and therefore ignore each other.
"""

from __future__ import annotations

import math
import numpy as np
from dataclasses import dataclass
from typing import List, Optional

from .body import Body
from .errors import ConfigurationError




@dataclass
class GalaxyConfig:
	star_min_r: float = 2.0
	star_max_r: float = 22.0
	star_mass: float = 1.0
	seed: Optional[int] = None


def get_orbit_speed(radius: float, center_mass: float, G: float = 0.02) -> float:
	return math.sqrt(G * center_mass / radius)


def create_galaxy(
	center_x: float,
	center_y: float,
	center_mass: float,
	num_stars: int,
	galaxy_vel_x: float = 0.0,
	galaxy_vel_y: float = 0.0,
	*,
	config: GalaxyConfig | None = None,
	G: float = 0.02,
	rng: np.random.Generator | None = None,
) -> List[Body]:
	cfg = config or GalaxyConfig()
	if not cfg.star_max_r > cfg.star_min_r > 0.0:
		raise ConfigurationError(
			f"galaxy radii must satisfy 0 < star_min_r < star_max_r, got "
			f"{cfg.star_min_r!r}, {cfg.star_max_r!r}"
		)
	if num_stars < 0:
		raise ConfigurationError(f"num_stars must be non-negative, got {num_stars!r}")
	if rng is None:
		rng = np.random.default_rng(cfg.seed)

	bodies = [Body(center_mass, center_x, center_y, galaxy_vel_x, galaxy_vel_y)]

	r = (cfg.star_max_r - cfg.star_min_r) * rng.random(num_stars) + cfg.star_min_r
	theta = 2.0 * np.pi * rng.random(num_stars)

	x_hat = np.cos(theta)
	y_hat = np.sin(theta)
	speed = np.sqrt(G * center_mass / r)

	# rotate the radial unit vector by +90 degrees
	vx = -y_hat * speed + galaxy_vel_x
	vy = x_hat * speed + galaxy_vel_y
	x = x_hat * r + center_x
	y = y_hat * r + center_y

	for i in range(num_stars):
		bodies.append(Body(cfg.star_mass, x[i], y[i], vx[i], vy[i]))
	return bodies


def two_galaxy_scene(
	G: float = 0.02,
	rng: np.random.Generator | None = None,
	seed: Optional[int] = None,
) -> List[Body]:
	if rng is None:
		rng = np.random.default_rng(seed)
	bodies = create_galaxy(20.0, 20.0, 100000.0, 600, 6.0, 0.0, G=G, rng=rng)
	bodies += create_galaxy(80.0, 50.0, 100000.0, 200, -3.0, -5.5, G=G, rng=rng)
	return bodies
