"""RestStop: restroom search, ranking and chat assistant."""

__version__ = "1.0.0"
