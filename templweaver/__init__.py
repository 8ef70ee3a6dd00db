"""Step-by-step tower defense simulation, a login service and a method-checked route table."""

__version__ = "0.1.0"
__all__ = ["auth", "game", "routes", "state", "units"]