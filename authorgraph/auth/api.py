"""Authentication API endpoints for authorgraph.

These endpoints handle registration and login and return JSON responses:
- POST /register - Create an author account
- POST /login    - Exchange username and password for a JWT token

Errors are raised as authorgraph exceptions and rendered by the error
handlers in main.py.
"""

import logging

from flask import Blueprint, jsonify

from ..api.validation import validate_request
from ..db import get_store
from . import service
from .schemas import AuthorCreate, AuthorLogin, TokenResponse

logger = logging.getLogger(__name__)


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
@validate_request
def register(data: AuthorCreate):
    """
    Register a new author.

    Args:
        data: First name, last name, username and password (min 4 characters)

    Returns:
        201 with every author (password hashes are never included)

    Raises:
        ValidationError: If a field is missing, the password is too short,
            or the username is already taken

    Example request:
    ```json
    {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "userName": "ada",
        "password": "engine"
    }
    ```

    Example response:
    ```json
    [
        {"id": "1", "firstName": "Bes", "lastName": "Sejio", "userName": "bes"},
        {"id": "4f1c...", "firstName": "Ada", "lastName": "Lovelace", "userName": "ada"}
    ]
    ```
    """
    authors = service.register_author(get_store(), data)
    return jsonify([a.model_dump(by_alias=True) for a in authors]), 201


@auth_bp.route("/login", methods=["POST"])
@validate_request
def login(data: AuthorLogin):
    """
    Authenticate an author and return a JWT token.

    The token is valid for settings.jwt_expiry_hours (one hour by default)
    and is passed to the GraphQL endpoint as ?token=<token>.

    Raises:
        ValidationError: If username or password is missing
        AuthenticationError: If the username is unknown or the password is wrong

    Example request:
    ```json
    {"userName": "ada", "password": "engine"}
    ```

    Example response:
    ```json
    {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."}
    ```
    """
    access_token = service.authenticate(get_store(), data)
    return jsonify(TokenResponse(token=access_token).model_dump()), 200
