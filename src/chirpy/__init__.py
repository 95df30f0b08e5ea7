"""Chirpy: a minimal social-post service backed by a single JSON document."""

__version__ = "0.1.0"
