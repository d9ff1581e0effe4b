"""
FormField model: the part of a field definition the validator needs.
"""

from pydantic import BaseModel, Field

from .validation_config import ValidationConfig


class FormField(BaseModel):
    """
    A form field as seen by the form validator.

    Older field records carry min/max directly on the field instead of inside
    the validation config. Those values are used only when the config leaves
    the bound unset.

    Attributes:
        id: Field identifier (key into the responses mapping)
        label: Label used in error messages (falls back to the id)
        field_type: Semantic type ("text", "number", "email", ...)
        validation: Attached validation config
        min: Legacy field-level minimum
        max: Legacy field-level maximum
    """

    id: str = Field(..., min_length=1)
    label: str = ""
    field_type: str = Field("text", alias="fieldType")
    validation: ValidationConfig | None = None
    min: int | float | None = None
    max: int | float | None = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "f_age",
                "label": "Age",
                "fieldType": "number",
                "validation": {"required": True, "min": 18, "max": 99},
            }
        }

    @property
    def display_label(self) -> str:
        return self.label or self.id

    def effective_validation(self) -> ValidationConfig:
        """Validation config with legacy field-level bounds merged in."""
        config = self.validation or ValidationConfig()
        if self.min is None and self.max is None:
            return config
        return config.model_copy(update={
            "min": config.min if config.min is not None else self.min,
            "max": config.max if config.max is not None else self.max,
        })
