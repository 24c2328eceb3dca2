"""Liveness HTTP endpoint for the News Bot."""
