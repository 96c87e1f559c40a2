"""Descriptor resolution on top of the field accessor."""

from .descriptor_resolver import (
    Descriptor,
    PropEntry,
    find_props_field,
    resolve_descriptor,
    resolve_prop_entries,
)
