"""Terminal user interface for browsing an environment."""
