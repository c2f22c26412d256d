from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

INVALID_DATA_MESSAGE = "The given data was invalid."


def field_label(field: str) -> str:
    return field.replace("_", " ")


def error_message(field: str, error: Dict[str, Any]) -> str:
    """Human readable message for a single pydantic error entry"""
    kind = error["type"]
    label = field_label(field)
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return f"The {label} field is required."
    if kind == "string_type":
        return f"The {label} field must be a string."
    if kind == "string_too_long":
        return f"The {label} field must not be greater than {ctx['max_length']} characters."
    if kind == "enum":
        return f"The selected {label} is invalid."
    if kind.startswith("date_"):
        return f"The {label} field must be a valid date."
    if kind == "value_error" and "error" in ctx:
        return str(ctx["error"])

    return error["msg"]


def collect_field_errors(
    errors: Iterable[Dict[str, Any]], skip_prefix: Optional[str] = None
) -> Dict[str, List[str]]:
    """Turn pydantic error entries into a field-keyed error map"""
    result: Dict[str, List[str]] = {}

    for error in errors:
        loc = list(error.get("loc") or ())
        if skip_prefix and loc and loc[0] == skip_prefix:
            loc = loc[1:]

        field = ".".join(str(part) for part in loc) or "body"
        result.setdefault(field, []).append(error_message(field, error))

    return result


def format_validation_errors(exc: ValidationError) -> Dict[str, List[str]]:
    return collect_field_errors(exc.errors())


def order_field_errors(
    errors: Dict[str, List[str]], fields: Iterable[str]
) -> Dict[str, List[str]]:
    """Reorder an error map to follow the declared field order"""
    fields = list(fields)
    ordered = {field: errors[field] for field in fields if field in errors}
    ordered.update(
        {field: messages for field, messages in errors.items() if field not in fields}
    )
    return ordered
