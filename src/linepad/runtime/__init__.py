"""Runtime services shared by the engine and its adapters."""

from . import telemetry

__all__ = ["telemetry"]
