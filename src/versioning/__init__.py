"""Version parsing and selection helpers."""
