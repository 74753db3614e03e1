"""Turn freeform creative notes into a structured video plan."""

__version__ = "0.1.0"
