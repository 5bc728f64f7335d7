"""Task list domain module."""
