"""Command line interface for the image converter."""
