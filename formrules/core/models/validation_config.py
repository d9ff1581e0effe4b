"""
ValidationConfig model: the declarative, serializable constraints attached to one form field.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

Number = int | float

CustomRuleType = Literal[
    "required",
    "minLength",
    "maxLength",
    "min",
    "max",
    "pattern",
    "email",
    "url",
    "phone",
    "alphanumeric",
    "lettersOnly",
    "numbersOnly",
    "noSpaces",
    "custom",
]


class CustomRule(BaseModel):
    """
    An extra rule stored alongside the main constraints.

    Attributes:
        type: Rule kind ("minLength", "pattern", "email", ...)
        value: Rule argument (a bound for length/value rules, a regex for pattern/custom)
        message: Optional message that replaces the standard one
    """

    type: CustomRuleType
    value: str | int | float | bool | None = None
    message: str | None = None


class ValidationConfig(BaseModel):
    """
    Constraints for a single field.

    An unset attribute means "no constraint of that kind". Serialized with
    camelCase keys and without unset entries so it can be embedded in a
    persisted field record.

    Attributes:
        required: Value must be non-blank
        min_length: Minimum string length (inclusive)
        max_length: Maximum string length (inclusive)
        min: Minimum numeric value (inclusive)
        max: Maximum numeric value (inclusive)
        pattern: Regular expression source the value must match
        custom_rules: Additional rules evaluated after the main constraints
    """

    required: bool | None = None
    min_length: Number | None = Field(None, alias="minLength")
    max_length: Number | None = Field(None, alias="maxLength")
    min: Number | None = None
    max: Number | None = None
    pattern: str | None = None
    custom_rules: list[CustomRule] | None = Field(None, alias="customRules")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "required": True,
                "minLength": 3,
                "maxLength": 120,
                "pattern": "^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\\.[a-zA-Z]{2,}$",
            }
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ValidationConfig":
        """Build a config from its serialized (camelCase) form."""
        return cls.model_validate(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted shape, omitting absent constraints."""
        return self.model_dump(by_alias=True, exclude_none=True)
