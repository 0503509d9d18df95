"""
schemas/ - Request Schemas
===========================
Pydantic models describing the request bodies accepted by the handlers.
"""
