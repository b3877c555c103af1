"""In-process systems: a publish/subscribe service and a tic-tac-toe engine."""

__version__ = "0.1.0"