"""Loading and checking .ber maps for a gem-collecting tile puzzle, with text, byte, list, line-reading and printf helpers."""

__version__ = "0.1.0"