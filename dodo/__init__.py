"""dodo - a safer, friendlier git command line."""

__version__ = "0.1.0"
