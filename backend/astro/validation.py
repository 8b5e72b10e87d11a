"""
Astro — Field Validation Rules
===============================

What:  The business rules for user-entered service and link fields, shared
       by the API services and by the client-side new-service form.
How:   Each check returns a {field: message} dict covering every failing
       field at once, so a form can flag all of them in a single pass.
"""

from typing import Any, Dict, Iterable, Optional

from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_url_adapter = TypeAdapter(AnyHttpUrl)

SERVICE_MESSAGES = {
    "name": "Naming your service is required",
    "url": "Linking your service is required",
    "url_invalid": "url must be a valid URL",
    "category": "Adding your service to a category is required",
    "category_missing": "The selected category does not exist",
    "category_invalid": "category must be a category id",
}


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_valid_url(value: str) -> bool:
    """True for absolute http(s) URLs, e.g. `http://192.168.1.10:8080/`."""
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def service_field_errors(
    values: Dict[str, Any],
    partial: bool = False,
    known_categories: Optional[Iterable[int]] = None,
) -> Dict[str, str]:
    """
    Validate service form values.

    Args:
        values:  Field values keyed by name (`name`, `url`, `category`).
        partial: Only check the keys present in `values` (PATCH semantics).
        known_categories: When given, `category` must be one of these ids.

    Returns:
        {field: message} for every failing field; empty when valid.
    """
    errors: Dict[str, str] = {}

    if not partial or "name" in values:
        if is_blank(values.get("name")):
            errors["name"] = SERVICE_MESSAGES["name"]

    if not partial or "url" in values:
        url = values.get("url")
        if is_blank(url):
            errors["url"] = SERVICE_MESSAGES["url"]
        elif not is_valid_url(str(url).strip()):
            errors["url"] = SERVICE_MESSAGES["url_invalid"]

    if not partial or "category" in values:
        category = values.get("category")
        if is_blank(category):
            errors["category"] = SERVICE_MESSAGES["category"]
        else:
            try:
                category_id = int(category)
            except (TypeError, ValueError):
                errors["category"] = SERVICE_MESSAGES["category_invalid"]
            else:
                if known_categories is not None and category_id not in set(known_categories):
                    errors["category"] = SERVICE_MESSAGES["category_missing"]

    return errors
