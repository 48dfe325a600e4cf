"""Runtime services shared by the engine (logging and profiling)."""

from . import telemetry

__all__ = ["telemetry"]
