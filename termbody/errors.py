"""
This module defines the exception types raised by the termbody package.

Only configuration problems are modelled: a bad tuning constant, a degenerate grid, a
non-positive timestep or an unusable initial body. These fail fast at setup so that the
simulation never silently produces NaN/Inf frames from a broken configuration. Numeric
degeneration during a run is not an error and is never raised.
"""


class TermbodyError(Exception):
	pass


class ConfigurationError(TermbodyError, ValueError):
	pass
