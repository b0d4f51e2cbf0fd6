"""Agent-SDD command runner."""

__version__ = "0.1.0"
