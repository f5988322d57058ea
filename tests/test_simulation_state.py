import numpy as np
import pytest

from termbody import Body, ConfigurationError, SimConfig, SimulationState


def test_build_state_packs_arrays():
	st = SimulationState()
	st.build_state([Body(2.0, 1.0, 2.0, 3.0, 4.0), {"mass": 5.0, "position": (6.0, 7.0), "velocity": (8.0, 9.0)}])
	assert st.n_bodies == 2
	np.testing.assert_array_equal(st.mass, [2.0, 5.0])
	np.testing.assert_array_equal(st.pos, [[1.0, 2.0], [6.0, 7.0]])
	np.testing.assert_array_equal(st.vel, [[3.0, 4.0], [8.0, 9.0]])
	np.testing.assert_array_equal(st.force, 0.0)


@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan"), float("inf")])
def test_bad_mass_rejected(mass):
	with pytest.raises(ConfigurationError, match="body 1"):
		SimulationState().build_state([Body(1.0, 0.0, 0.0), Body(mass, 1.0, 1.0)])


def test_non_finite_position_rejected():
	with pytest.raises(ConfigurationError, match="position"):
		SimulationState().build_state([Body(1.0, float("inf"), 0.0)])


def test_snapshot_is_a_frozen_copy():
	st = SimulationState()
	st.build_state([Body(3.0, 1.0, 2.0), Body(4.0, 5.0, 6.0)])
	snap = st.snapshot()
	st.pos[0, 0] = 100.0

	assert list(snap) == [(1.0, 2.0, 3.0), (5.0, 6.0, 4.0)]
	assert len(snap) == 2
	with pytest.raises(ValueError):
		snap.pos[0, 0] = 9.0


def test_views_read_and_write_through():
	st = SimulationState()
	st.build_state([Body(1.0, 0.0, 0.0)])
	v = st.view(0)
	v.x = 4.0
	v.vy = -2.0
	v.add_force(1.0, 0.5)
	assert st.pos[0, 0] == 4.0
	assert st.vel[0, 1] == -2.0
	assert (v.fx, v.fy) == (1.0, 0.5)
	with pytest.raises(IndexError):
		st.view(3)


def test_float32_state():
	st = SimulationState.from_config(SimConfig(fast_float32=True))
	st.build_state([Body(1.0, 0.5, 0.5)])
	assert st.pos.dtype == np.float32


def test_append_and_round_trip_bodies():
	st = SimulationState()
	st.build_state([])
	st.append(Body(2.0, 1.0, 1.0, 0.5, 0.0))
	assert st.n_bodies == 1
	assert st.to_bodies() == [Body(2.0, 1.0, 1.0, 0.5, 0.0)]
