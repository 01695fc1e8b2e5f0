"""
Command-line interface for tidy-style.
"""
