r"""Presets of retryable exception types for third-party libraries."""
