"""Templating — kida environment setup for the view layer."""
