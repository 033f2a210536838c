"""
Pydantic schema definitions for API payloads and stored records.

Each domain (users, teams, invitations, etc.) defines its own models
for request bodies and for the records held by the in-memory store.
"""
