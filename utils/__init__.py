"""
utils/ - Shared Utilities
==========================
Logging setup and the error taxonomy used across all layers.
"""
