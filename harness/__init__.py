"""Command-line runners for the rook's graph generator."""
