"""
notbuiltyet - builds the idea board data file from GitHub issues.
"""

__version__ = "1.0.0"
