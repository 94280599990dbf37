from __future__ import annotations

from keepclicking.domain.entities import ResourceCategory
from keepclicking.ui.components.resources import render_resource_category
from keepclicking.ui.html import escape


def render_resources(title: str, subtitle: str, categories: list[ResourceCategory]) -> str:
    sections = "\n".join(render_resource_category(c) for c in categories)
    return f"""<h1 class="resources_title">{escape(title)}</h1>
<p class="resources_subtitle">{escape(subtitle)}</p>
{sections}"""
