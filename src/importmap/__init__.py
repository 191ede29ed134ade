"""Import map loading, writing and candidate selection."""
