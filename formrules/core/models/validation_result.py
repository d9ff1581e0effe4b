"""
ValidationError and ValidationResult models (ephemeral, created on every validation pass).
"""

from typing import List

from pydantic import BaseModel, Field, computed_field


class ValidationError(BaseModel):
    """
    A field-scoped, user-facing validation failure.

    Attributes:
        field: Id of the field that failed
        field_label: Label shown to the user
        message: Human-readable message
    """

    field: str
    field_label: str = Field(..., alias="fieldLabel")
    message: str

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "field": "f_email",
                "fieldLabel": "Email",
                "message": "Email must be: valid email address",
            }
        }


class ValidationResult(BaseModel):
    """
    Outcome of validating a whole form.

    Note: is_valid is derived from errors and cannot be set on its own.

    Attributes:
        errors: Errors for all fields, in field order
    """

    errors: List[ValidationError] = Field(default_factory=list)

    @computed_field(alias="isValid")
    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def errors_for(self, field_id: str) -> List[ValidationError]:
        """Return the errors reported for one field."""
        return [e for e in self.errors if e.field == field_id]
