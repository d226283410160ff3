"""Puzzle domain: geometry, board catalog, paths, editing and validation."""
