"""
Console helpers.
"""
