"""
Pydantic schema definitions for API payloads.

Schemas are separated from the database rows to decouple the API
representation from persistence.
"""
