"""
Service layer abstraction.

Services encapsulate the store operations behind the API handlers so
the persistence backend can change without touching the endpoints.
"""
