"""Wall Squares: rules engine for a two-player wall-claiming grid game."""
