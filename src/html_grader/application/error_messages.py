"""User-friendly error messages for configuration validation errors.

Belongs to the Application layer — translates Pydantic machine errors
into messages an instructor editing a config file can act on.
"""

from __future__ import annotations

from typing import Any

# Maps (field, error_type) → message
_ERROR_MAP: dict[tuple[str, str], str] = {
    ("candidate_filenames", "too_short"): "List at least one candidate filename (e.g. index.html).",
    ("candidate_filenames", "list_type"): "candidate_filenames must be a list of filenames.",
    ("candidate_filenames", "value_error"): "Candidate filenames must not be blank.",
    ("parser_features", "string_type"): "parser_features must be a string such as 'html5lib'.",
    ("show_error_details", "bool_parsing"): "show_error_details must be true or false.",
    ("show_error_details", "bool_type"): "show_error_details must be true or false.",
}


def friendly_error(field: str, error_type: str, fallback: str | None = None) -> str:
    """Return a user-friendly error message.

    Args:
        field: The Pydantic field path that failed validation.
        error_type: The Pydantic error type string (e.g., ``too_short``).
        fallback: Fallback message if no mapping exists.

    Returns:
        A user-friendly error string.
    """
    top_level = field.split(".", 1)[0]
    message = _ERROR_MAP.get((field, error_type)) or _ERROR_MAP.get((top_level, error_type))
    if message:
        return message
    return fallback or f"Validation error on field '{field}'."


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Convert a list of Pydantic error dicts to user-friendly messages.

    Args:
        errors: Output of ``ValidationError.errors()``.

    Returns:
        List of ``"<field>: <message>"`` strings.
    """
    result: list[str] = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get("loc", []))
        msg = friendly_error(field, err.get("type", ""), fallback=err.get("msg"))
        result.append(f"{field}: {msg}" if field else msg)
    return result
