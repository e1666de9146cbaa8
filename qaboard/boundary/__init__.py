"""
Boundary layer for external system integrations.

Holds the database adapter; everything that talks to PostgreSQL lives here.
"""
