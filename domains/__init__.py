"""Domain modules for the News Bot."""
