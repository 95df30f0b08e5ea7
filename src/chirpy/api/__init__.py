"""HTTP API for Chirpy."""
