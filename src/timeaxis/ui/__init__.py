"""Qt adapters for the time axis engine."""
