"""
Utility helpers: URL and output path validation, rate formatting and
logger creation.
"""
