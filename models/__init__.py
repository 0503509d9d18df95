"""
models/ - Domain Layer
=======================
Dataclasses and column metadata for the persisted entities.
"""
