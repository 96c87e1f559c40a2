"""Parsers turning JavaScript and YAML text into linter models."""
