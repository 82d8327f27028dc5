"""Configuration — limits, defaults, settings discovery, and logging."""
