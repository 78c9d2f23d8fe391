"""Shared utilities: constants and error types."""
