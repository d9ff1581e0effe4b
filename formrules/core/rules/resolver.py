"""
Field-type to rule resolution.

Narrows the catalog to the templates that make sense for a field's
semantic type. Exactly one branch applies per field type.
"""

from typing import Callable

from formrules.core.models import RuleTemplate

from .catalog import RULE_TEMPLATES

TemplateFilter = Callable[[RuleTemplate], bool]


def _in_categories(*categories: str) -> TemplateFilter:
    return lambda t: t.category in categories


def _ids_or_text(*rule_ids: str) -> TemplateFilter:
    return lambda t: t.id in rule_ids or t.category == "text"


# (field types, filter), first match wins; lookups are case-sensitive
FIELD_TYPE_FILTERS: tuple[tuple[frozenset[str], TemplateFilter], ...] = (
    (frozenset({"text", "textarea", "input", "Input"}),
     _in_categories("text", "contact", "format", "security", "college")),
    (frozenset({"number", "slider", "cgpa"}), _in_categories("number", "college")),
    (frozenset({"email"}), _ids_or_text("email", "collegeEmail")),
    (frozenset({"phone"}), _ids_or_text("phone", "indianPhone")),
    (frozenset({"url", "website"}), _ids_or_text("url")),
)

DEFAULT_FILTER: TemplateFilter = _in_categories("text")


def resolve_filter(field_type: str) -> TemplateFilter:
    """Return the template filter for a field type."""
    for field_types, template_filter in FIELD_TYPE_FILTERS:
        if field_type in field_types:
            return template_filter
    return DEFAULT_FILTER


def get_rules_for_field_type(field_type: str) -> list[RuleTemplate]:
    """
    Get the rule templates applicable to a field type.

    Args:
        field_type: The field's semantic type ("text", "number", "email", ...)

    Returns:
        Matching templates in catalog order; never empty, since every branch
        admits the text-category rules or the college rules
    """
    template_filter = resolve_filter(field_type)
    return [t for t in RULE_TEMPLATES if template_filter(t)]
