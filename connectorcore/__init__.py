"""Messages, identifiers, an integer queue, connection directories and loopback TCP endpoints."""

__version__ = "0.1.0"