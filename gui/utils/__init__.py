"""Event loop and logging helpers for the page layer."""
