"""Color-link grid puzzle engine."""
