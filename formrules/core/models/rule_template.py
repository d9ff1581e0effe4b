"""
RuleTemplate and ActiveRule models.

A RuleTemplate is a named recipe that produces part of a ValidationConfig.
An ActiveRule is a user's in-progress selection of a template plus parameters
during editing; it is never persisted as such.
"""

from typing import Any, Callable, Literal

from pydantic import BaseModel, Field

RuleCategory = Literal["text", "number", "contact", "format", "security", "college"]

RULE_CATEGORIES: tuple[str, ...] = ("text", "number", "contact", "format", "security", "college")


class RuleTemplate(BaseModel):
    """
    A reusable rule recipe from the catalog.

    Attributes:
        id: Unique identifier ("minLength", "email", ...)
        name: Display name
        description: What the rule enforces
        category: Catalog group the rule belongs to
        generate_validation: Pure function turning optional params into a partial config dict
        generate_pattern: Returns the raw regex source for pattern-based rules
    """

    id: str = Field(..., min_length=1)
    name: str
    description: str
    category: RuleCategory
    generate_validation: Callable[[dict[str, Any] | None], dict[str, Any]]
    generate_pattern: Callable[[], str] | None = None

    class Config:
        frozen = True

    @property
    def is_parameterized(self) -> bool:
        """True for rules that take a numeric value (length and range rules)."""
        return self.generate_pattern is None

    def __repr__(self) -> str:
        return f"RuleTemplate(id={self.id!r}, category={self.category!r})"


class RuleParams(BaseModel):
    """Parameters a user supplies for an active rule."""

    value: int | float | None = None
    pattern: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ActiveRule(BaseModel):
    """
    A rule chosen in the editor, with its parameters.

    Attributes:
        rule_id: Id of a RuleTemplate, or "custom" for a free-form pattern
        params: Optional parameters (numeric value or pattern source)
    """

    rule_id: str = Field(..., alias="ruleId", min_length=1)
    params: RuleParams | None = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {"ruleId": "minLength", "params": {"value": 5}}
        }

    def params_dict(self) -> dict[str, Any] | None:
        return self.params.as_dict() if self.params is not None else None
