"""Mesto: photo card sharing backend."""
