"""Gatekeeper - role presets plus per-user overrides for access decisions."""

__version__ = "0.1.0"
