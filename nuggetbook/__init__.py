# nuggetbook/__init__.py
"""Reading tracker: books, nuggets (excerpts) and public share links."""

__version__ = "0.1.0"
