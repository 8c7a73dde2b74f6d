"""HTTP API for the Digix blog."""
