"""Persistence adapters for the ``Users`` and ``TaskList`` collections."""
