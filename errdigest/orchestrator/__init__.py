from .engine import run_pipeline, Event

__all__ = ["run_pipeline", "Event"]
