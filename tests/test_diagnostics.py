import pytest

from termbody import Body, Diagnostics, NBodySimulation, SimConfig


def test_observables():
	sim = NBodySimulation(SimConfig(), [Body(2.0, 0.0, 0.0, 1.0, 0.0), Body(6.0, 4.0, 0.0, 0.0, -1.0)])
	diag = Diagnostics(sim)

	assert diag.kinetic_energy() == pytest.approx(0.5 * 2.0 + 0.5 * 6.0)
	assert diag.potential_energy() == pytest.approx(-0.02 * 12.0 / 4.0)
	assert diag.linear_momentum() == pytest.approx((2.0, -6.0))
	assert diag.center_of_mass() == pytest.approx((3.0, 0.0))
	assert "n=2" in diag.summary()


def test_empty_simulation():
	diag = Diagnostics(NBodySimulation(SimConfig(), []))
	assert diag.kinetic_energy() == 0.0
	assert diag.center_of_mass() == (0.0, 0.0)
	assert diag.linear_momentum() == (0.0, 0.0)
