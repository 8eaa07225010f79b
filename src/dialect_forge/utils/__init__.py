"""Shared utilities for dialect_forge."""
