"""CivicDesk: complaint intake, triage and performance dashboard backend."""

__version__ = "1.0.0"
