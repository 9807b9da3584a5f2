"""Core library concerns: configuration and logging."""
