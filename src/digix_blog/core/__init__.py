"""Core configuration for the Digix blog service."""
