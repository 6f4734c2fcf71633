"""Bundled dictionaries used when test mode is enabled.

Kept as a real package so importlib.resources finds the JSON files both
from a checkout and from an installed wheel.
"""
