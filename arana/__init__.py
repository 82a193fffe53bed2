"""MySQL wire-protocol value encoding, column metadata, date/time conversion and escaping."""

__version__ = "0.1.0"