"""
This module defines the Body class, a simple data container for one point mass handed to
the simulation at setup.

The class stores the fundamental properties (mass, position x/y, velocity vx/vy) as
floating-point attributes and provides a clean string representation for debugging. It is
only the initial-condition format: once the simulation is initialized the values are
packed into contiguous numpy arrays and individual bodies are reached through BodyView.
"""
class Body:
	__slots__ = ("mass", "x", "y", "vx", "vy")

	def __init__(self, mass: float, x: float, y: float, vx: float = 0.0, vy: float = 0.0):
		self.mass = float(mass)
		self.x = float(x)
		self.y = float(y)
		self.vx = float(vx)
		self.vy = float(vy)

	@classmethod
	def from_mapping(cls, data) -> "Body":
		if "position" in data:
			x, y = data["position"]
		else:
			x, y = data["x"], data["y"]
		if "velocity" in data:
			vx, vy = data["velocity"]
		else:
			vx, vy = data.get("vx", 0.0), data.get("vy", 0.0)
		return cls(data["mass"], x, y, vx, vy)

	def __eq__(self, other) -> bool:
		if not isinstance(other, Body):
			return NotImplemented
		return (self.mass, self.x, self.y, self.vx, self.vy) == (
			other.mass, other.x, other.y, other.vx, other.vy
		)

	def __repr__(self) -> str:
		return f"Body(mass={self.mass}, x={self.x}, y={self.y}, vx={self.vx}, vy={self.vy})"
