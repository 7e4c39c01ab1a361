"""Golf course and player document API."""

__version__ = "0.1.0"
