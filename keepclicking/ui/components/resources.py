from __future__ import annotations

from keepclicking.domain.entities import ResourceCategory, ResourceItem
from keepclicking.ui.html import escape


def render_resource_item(item: ResourceItem) -> str:
    description = f"\n  <p>{escape(item.description)}</p>" if item.description else ""
    return (
        f'<div class="resource_item">\n'
        f'  <a href="{escape(item.url)}" rel="noopener noreferrer">{escape(item.name)}</a>'
        f"{description}\n</div>"
    )


def render_resource_category(category: ResourceCategory) -> str:
    items = "\n".join(render_resource_item(i) for i in category.items)
    return f"<section>\n<h2>{escape(category.title)}</h2>\n{items}\n</section>"
