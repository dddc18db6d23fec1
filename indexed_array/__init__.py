"""Fixed-size arrays, spans and bitsets indexed by ranges, enums, value sequences or functions."""

__version__ = "0.1.0"