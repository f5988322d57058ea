import math

import numpy as np
import pytest

from termbody import Body, SimConfig, SimulationState
from termbody.forces import GravitySolver, gravitational_force, pairwise_force


def _state(bodies, cfg=None):
	st = SimulationState.from_config(cfg or SimConfig())
	st.build_state(bodies)
	return st


def test_pairwise_force_magnitude_and_direction():
	fx, fy = pairwise_force(0.0, 0.0, 2.0, 3.0, 4.0, 5.0, G=0.5)
	assert math.hypot(fx, fy) == pytest.approx(0.5 * 2.0 * 5.0 / 25.0)
	assert fx / fy == pytest.approx(3.0 / 4.0)
	assert fx > 0 and fy > 0


def test_pairwise_force_skips_close_pairs_by_manhattan_distance():
	# Euclidean 0.71 but Manhattan exactly 1.0: skipped
	assert pairwise_force(0.0, 0.0, 1.0, 0.5, 0.5, 1.0, G=1.0) == (0.0, 0.0)
	# Euclidean 0.8 but Manhattan 1.1: not skipped
	assert pairwise_force(0.0, 0.0, 1.0, 0.8, 0.3, 1.0, G=1.0) != (0.0, 0.0)


def test_newtons_third_law(open_cfg):
	st = _state([Body(50.0, 10.0, 10.0), Body(50.0, 13.0, 14.0)], open_cfg)
	F = GravitySolver(open_cfg).forces(st.snapshot())
	np.testing.assert_allclose(F[0], -F[1])
	assert np.linalg.norm(F[0]) == pytest.approx(open_cfg.G * 50.0 * 50.0 / 25.0)


def test_matches_scalar_reference(open_cfg):
	rng = np.random.default_rng(3)
	pos = rng.uniform(0, 50, size=(12, 2))
	mass = rng.uniform(1, 300, size=12)
	F = gravitational_force(pos, mass, open_cfg.G, proximity_threshold=1.0)

	for i in range(12):
		fx = fy = 0.0
		for j in range(12):
			if i == j:
				continue
			dfx, dfy = pairwise_force(*pos[i], mass[i], *pos[j], mass[j], open_cfg.G, 1.0)
			fx += dfx
			fy += dfy
		assert list(F[i]) == pytest.approx([fx, fy], rel=1e-9, abs=1e-9)


def test_accumulation_is_order_independent(open_cfg):
	rng = np.random.default_rng(7)
	pos = rng.uniform(0, 40, size=(9, 2))
	mass = rng.uniform(1, 200, size=9)
	perm = rng.permutation(9)

	F = gravitational_force(pos, mass, open_cfg.G)
	F_perm = gravitational_force(pos[perm], mass[perm], open_cfg.G)
	np.testing.assert_allclose(F_perm, F[perm], rtol=1e-10, atol=1e-9)


def test_mass_cutoff_ignores_light_sources():
	cfg = SimConfig()  # cutoff 100
	st = _state([Body(1.0, 0.0, 0.0), Body(1000.0, 10.0, 0.0)], cfg)
	F = GravitySolver(cfg).forces(st.snapshot())
	# the light star feels the core, the core feels nothing
	assert F[0, 0] > 0.0
	np.testing.assert_array_equal(F[1], [0.0, 0.0])


def test_mass_cutoff_boundary_is_inclusive():
	cfg = SimConfig(mass_cutoff=100.0)
	st = _state([Body(100.0, 0.0, 0.0), Body(100.0, 5.0, 0.0)], cfg)
	F = GravitySolver(cfg).forces(st.snapshot())
	assert F[0, 0] > 0.0 and F[1, 0] < 0.0


def test_coincident_bodies_produce_no_force(open_cfg):
	F = gravitational_force(np.array([[1.0, 1.0], [1.0, 1.0]]), np.array([5.0, 5.0]), 1.0)
	assert np.all(np.isfinite(F))
	np.testing.assert_array_equal(F, 0.0)


def test_accumulate_adds_into_existing_force(open_cfg):
	st = _state([Body(10.0, 0.0, 0.0), Body(10.0, 4.0, 0.0)], open_cfg)
	solver = GravitySolver(open_cfg)
	snap = st.snapshot()
	solver.accumulate(st, snap)
	once = st.force.copy()
	solver.accumulate(st, snap)
	np.testing.assert_allclose(st.force, 2 * once)


def test_single_body_and_zero_g():
	assert gravitational_force(np.zeros((1, 2)), np.ones(1), 1.0).shape == (1, 2)
	F = gravitational_force(np.array([[0.0, 0.0], [5.0, 0.0]]), np.array([1.0, 1.0]), 0.0)
	np.testing.assert_array_equal(F, 0.0)
