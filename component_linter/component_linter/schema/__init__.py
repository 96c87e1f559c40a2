"""Bundled JSON Schemas.

This package only holds data files; see models.json_schema_loader.
"""
