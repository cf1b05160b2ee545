"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services wrap
the in‑memory ``DataStore`` so that API handlers never touch storage
directly; swapping the store for a database only requires a new
``RecordTable`` implementation.
"""
