"""
Pydantic schema definitions for API payloads.

Each entity defines its own request and response models.  Python
attributes are snake_case; the JSON names are camelCase aliases.
"""
