import pytest

from termbody import SimConfig


@pytest.fixture
def open_cfg():
	# every body attracts every other, no proximity skip beyond coincident points
	return SimConfig(mass_cutoff=None, proximity_threshold=0.0)
