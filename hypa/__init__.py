"""
hypa: line-oriented plaintext hypertext to HTML.
"""

__version__ = "1.0.0"
