"""
Pydantic schema definitions for API payloads.

Only the shapes the API actually constrains are modelled here.  Service
and user documents are opaque to this layer and are exchanged as plain
JSON objects.
"""
