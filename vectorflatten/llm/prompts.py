"""Prompt templates for LLM-assisted SVG clean-up."""

from __future__ import annotations

_OPTIMIZE_TEMPLATE = """You prepare SVG files for conversion to Android VectorDrawable.

The converter understands <svg>, <g>, <path>, <rect>, <circle>, <ellipse>, <line>, <polyline>, <polygon>, \
transform attributes, presentation attributes, inline style, class rules in <style>, and linear/radial gradients.
It skips <text>, <image>, <use>, <foreignObject>, clip paths, masks, filters and patterns.

Rewrite the SVG so that it renders the same but only uses supported constructs:
- Inline every <use> as a copy of the element it references.
- Replace clip paths and masks by the clipped geometry where this is exact; otherwise drop them.
- Drop filters, patterns, scripts and editor metadata.
- Keep coordinates, transforms, colours and gradients unchanged.

Reply with the complete SVG document only.

=== SVG CODE ===
{svg}
"""

_TEMPLATES = {
    "optimize": _OPTIMIZE_TEMPLATE,
}


def get_prompt_template(task: str) -> str:
    return _TEMPLATES[task]


def get_all_templates() -> dict[str, str]:
    return dict(_TEMPLATES)
