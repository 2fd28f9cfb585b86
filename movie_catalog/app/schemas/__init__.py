"""
Pydantic schema definitions for API payloads.

Each domain (ratings, movies, catalog) defines its own Pydantic models
for response bodies.  The same models are used when one service
decodes another service's response, so the wire format is defined in
exactly one place.
"""
