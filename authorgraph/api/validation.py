"""Request body validation for Flask views.

@validate_request reads the view's type annotations. Parameters that Flask
fills from the URL (view_args) are passed through unchanged; every other
parameter must be annotated with a Pydantic model and is built from the
JSON request body.

    @auth_bp.post("/login")
    @validate_request
    def login(data: AuthorLogin):
        ...

Pydantic errors become ValidationError with details:
- model: name of the Pydantic model
- received: the decoded body
- fields: names of the failed fields
- errors: list of {field, message, expected_type}
"""

import inspect
from functools import wraps
from typing import get_type_hints

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


def format_errors(error: PydanticValidationError) -> list[dict]:
    """Flatten Pydantic errors into {field, message, expected_type} dicts."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "expected_type": err["type"],
        }
        for err in error.errors()
    ]


def parse_model(model: type[BaseModel], data) -> BaseModel:
    """
    Validate data against a Pydantic model.

    Raises:
        ValidationError: With field-level details if validation fails
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        errors = format_errors(e)
        raise ValidationError(
            "Invalid request data",
            {
                "model": model.__name__,
                "received": data,
                "fields": sorted({err["field"] for err in errors}),
                "errors": errors,
            }
        )


def validate_request(f):
    """
    Decorator that validates the JSON body into the view's annotated model.

    Raises:
        TypeError: At decoration time if the view has no parameters or its
            first parameter is unannotated; at request time if a body
            parameter is not annotated with a BaseModel subclass
        ValidationError: If the body is not a JSON object or fails validation
    """
    params = list(inspect.signature(f).parameters.values())
    if not params:
        raise TypeError(f"{f.__name__} has no parameters to validate")

    hints = get_type_hints(f)
    if params[0].name not in hints:
        raise TypeError(f"First parameter '{params[0].name}' of {f.__name__} lacks a type annotation")

    @wraps(f)
    def wrapper(*args, **kwargs):
        view_args = request.view_args or {}
        for param in params:
            if param.name in view_args or param.name in kwargs:
                continue

            model = hints.get(param.name)
            if not (inspect.isclass(model) and issubclass(model, BaseModel)):
                raise TypeError(
                    f"Parameter '{param.name}' of {f.__name__} must be annotated "
                    "with a Pydantic BaseModel subclass"
                )

            body = request.get_json(silent=True)
            if body is None:
                body = {}
            if not isinstance(body, dict):
                raise ValidationError(
                    "Request body must be a JSON object",
                    {"model": model.__name__, "received": body}
                )
            kwargs[param.name] = parse_model(model, body)

        return f(*args, **kwargs)

    return wrapper
