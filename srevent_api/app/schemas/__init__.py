"""
Pydantic schema definitions for API payloads.

Documents are open: callers may store any fields they like.  The models
here only pin down the fields the service itself maintains (identity,
timestamps, status/role) and let everything else through unchanged.
"""
