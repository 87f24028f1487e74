"""
Pydantic schema definitions for API payloads.

Each domain (users, exercises, logs) defines its own Pydantic models
for request and response bodies.  Schemas are separated from the
database records in ``core.db`` to decouple the public JSON shape from
persistence.
"""
