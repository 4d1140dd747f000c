"""Page view models."""
