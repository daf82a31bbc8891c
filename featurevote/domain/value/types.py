"""Domain value objects for Feature Vote.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from typing import Optional

from pydantic import field_validator

from featurevote.domain.value.common import ValueObject

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000


class FeatureDraft(ValueObject):
    """Validated input for a new feature request.

    Both fields are trimmed. A blank or omitted description is stored as None.
    """

    title: str
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Trim the title and enforce 1-255 characters."""
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        if len(v) > TITLE_MAX_LENGTH:
            raise ValueError(
                f"Title must be between 1 and {TITLE_MAX_LENGTH} characters"
            )
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        """Trim the description, collapse blank to None, enforce max length."""
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        if len(v) > DESCRIPTION_MAX_LENGTH:
            raise ValueError(
                f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
            )
        return v
