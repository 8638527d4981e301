"""
Boundary layer for external system integrations.

Handles all interactions with external systems (the PostgreSQL state store).
Provides adapters and clients for infrastructure dependencies.
"""
