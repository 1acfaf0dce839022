"""Game configuration constants."""

# Board dimensions used when none are given
DEFAULT_WIDTH = 3
DEFAULT_HEIGHT = 3

# Upper bound on width/height accepted from user input (CLI and HTTP)
MAX_DIMENSION = 20
