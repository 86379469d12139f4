"""
Field validation rules shared by the user and post use cases.

A rule is a (field, max_length, required) triple. Rules are evaluated in two
passes over the same declaration order: presence of required fields first,
then length of every supplied field. The first failure raises.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from .constants import PostFields, UserFields
from .exceptions import ValidationError


@dataclass(frozen=True)
class ValidationRule:
    field: str
    max_length: Optional[int] = None
    required: bool = False


USER_RULES: Sequence[ValidationRule] = (
    ValidationRule(UserFields.NAME, UserFields.NAME_MAX_LENGTH, required=True),
    ValidationRule(UserFields.USERNAME, UserFields.USERNAME_MAX_LENGTH, required=True),
    ValidationRule(UserFields.EMAIL, UserFields.EMAIL_MAX_LENGTH, required=True),
    ValidationRule(UserFields.PASSWORD, required=True),
    ValidationRule(UserFields.PHONE, UserFields.PHONE_MAX_LENGTH),
    ValidationRule(UserFields.WEBSITE, UserFields.WEBSITE_MAX_LENGTH),
)

POST_RULES: Sequence[ValidationRule] = (
    ValidationRule(PostFields.TITLE, PostFields.TITLE_MAX_LENGTH, required=True),
    ValidationRule(PostFields.BODY, PostFields.BODY_MAX_LENGTH, required=True),
    ValidationRule(PostFields.USER_ID, required=True),
)


def is_missing(value: Any) -> bool:
    """None, the empty string and a zero ID all count as not supplied."""
    return value is None or value == "" or (isinstance(value, int) and value == 0)


def validate_fields(
    values: Mapping[str, Any],
    rules: Sequence[ValidationRule],
    enforce_required: bool = True,
) -> None:
    """
    Check `values` against `rules`.
    
    Args:
        values: Field name to supplied value
        rules: Rules in declaration order
        enforce_required: False for partial updates, where every field is optional
        
    Raises:
        ValidationError: On the first missing required field, otherwise on
            the first field that exceeds its maximum length
    """
    if enforce_required:
        for rule in rules:
            if rule.required and is_missing(values.get(rule.field)):
                raise ValidationError(f"{rule.field} is required")
    
    for rule in rules:
        if rule.max_length is None:
            continue
        value = values.get(rule.field)
        if isinstance(value, str) and len(value) > rule.max_length:
            raise ValidationError(
                f"{rule.field} must be less than {rule.max_length} characters"
            )
