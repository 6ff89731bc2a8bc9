"""
cliki: a command-line wiki kept in a git repository.
"""

__version__ = "0.3.0"
