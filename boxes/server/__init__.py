"""HTTP adapter exposing game sessions to a browser presentation layer."""
