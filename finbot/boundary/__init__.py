"""
Boundary layer for external system integrations.

Adapters for the session database, the Gemini embedding and generation
APIs, and outbound session delivery.
"""
