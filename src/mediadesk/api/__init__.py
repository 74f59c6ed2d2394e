"""API module for Mediadesk.

api layer:
- Parses query strings and bodies, calls catalog services
- Returns payloads for UI
- Maps validation, not-found and persistence failures onto status codes
"""
