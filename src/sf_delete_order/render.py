"""Render a delete order through a one-placeholder text template."""

from __future__ import annotations

from typing import Iterable

from sf_delete_order.exceptions import TemplateError
from sf_delete_order.salesforce.models import SObject

NAME_PLACEHOLDER = "{name}"
DEFAULT_TEMPLATE = NAME_PLACEHOLDER


def validate_template(template: str) -> str:
    if NAME_PLACEHOLDER not in template:
        raise TemplateError(
            f"Template must contain the {NAME_PLACEHOLDER} placeholder: {template!r}"
        )
    return template


def render_line(template: str, sobject: SObject) -> str:
    # Plain replacement: Apex and SOQL templates contain their own braces
    return template.replace(NAME_PLACEHOLDER, sobject.name)


def render_order(sobjects: Iterable[SObject], template: str | None = None) -> list[str]:
    """Render one line per SObject, keeping order.

    ``None`` or an empty template falls back to :data:`DEFAULT_TEMPLATE`.

    Raises:
        TemplateError: If the template lacks the name placeholder.
    """
    template = validate_template(template or DEFAULT_TEMPLATE)
    return [render_line(template, sobject) for sobject in sobjects]


__all__ = [
    "NAME_PLACEHOLDER",
    "DEFAULT_TEMPLATE",
    "validate_template",
    "render_line",
    "render_order",
]
