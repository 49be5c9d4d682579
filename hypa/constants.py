"""
Global constants shared by the parser, renderer and CLI.
"""

DEFAULT_TITLE = "Some hypertext"
"""Document title used when neither the CLI nor the config supplies one"""

DEFAULT_LOG_LEVEL = "WARNING"

LOG_ROTATION = "10 MB"
"""Rotation threshold for the optional log file sink"""

MAX_TABLE_TEXT_LENGTH = 60
"""Maximum length for block content shown in the inspection table"""
