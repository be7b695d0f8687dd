"""
dfget-cli: startup configuration validator and resolver for the dfget
peer-assisted download client.
"""

__version__ = "0.1.0"
