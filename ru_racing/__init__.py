"""RU Racing: the Algorithmic Grand Prix simulation engine."""

__version__ = "1.0.0"
