"""
HTML rendering of parsed blocks.
"""
