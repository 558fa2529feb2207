"""Adapters layer - infrastructure implementations."""
