"""Adventurers: a terminal tile-map exploration game."""
