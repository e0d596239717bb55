"""Core configuration, options and error types."""
