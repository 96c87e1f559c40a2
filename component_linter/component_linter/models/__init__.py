"""Syntax node models and source parsers."""
