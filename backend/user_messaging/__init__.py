"""User Messaging Package — REST API for registering users and exchanging messages.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
