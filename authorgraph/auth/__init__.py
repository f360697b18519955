"""Authentication module for authorgraph.

This module provides authentication functionality:
- Schema validation for auth operations
- JWT token generation and validation
- Password hashing and verification
- Author registration, login and updates

Auth endpoints (top-level routes):
- POST /register - Create an author account
- POST /login    - Authenticate and return a JWT token
"""

from . import schemas, service, token

__all__ = ["schemas", "service", "token"]
