"""
Pydantic schema definitions for API payloads.

Users and log entries define their own Pydantic models for request
and response bodies.  Schemas are separated from the stored records
to decouple API representation from persistence.
"""
