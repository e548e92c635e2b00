"""Aggregation module for dataset statistics.

Boundary:
- Takes an already-loaded snapshot and returns derived views
- Forbidden: file IO, database access, holding a "current dataset"
"""
