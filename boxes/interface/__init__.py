"""Text presentation layer for Wall Squares."""
