"""
Version 1 of the API.

These are the routes the existing web frontend calls.  Breaking changes
belong in a new version subpackage.
"""
