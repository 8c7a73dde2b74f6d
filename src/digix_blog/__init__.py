"""Blog posts, likes and moderated comments for the Digix marketing site."""

__version__ = "0.1.0"
