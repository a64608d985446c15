"""
Boundary layer for external system integrations.

Handles all interactions with the Circonus REST API.
Provides the shared HTTP client and per-resource bindings on top of it.
"""
