"""
Version 1 of the API.

This subpackage bundles the query and mutation routes for the four
collections of the Event Registry API.  Breaking changes belong in a
new version subpackage (e.g. ``v2``).
"""
