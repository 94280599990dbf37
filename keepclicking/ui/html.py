"""
HTML helpers shared by every view: escaping and the document shell.
"""

from __future__ import annotations

from urllib.parse import quote

from keepclicking.components.render import PageMetadata


def escape(text: str | None) -> str:
    """Escape HTML special characters (quotes included)."""
    if not text:
        return ""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def tag_path(tag: str) -> str:
    """URL path of a tag page."""
    return f"/tags/{quote(tag, safe='')}/"


def render_meta_tags_html(metadata: PageMetadata) -> str:
    """Render PageMetadata to HTML meta tag string."""
    html_parts: list[str] = [f"<title>{escape(metadata.title)}</title>"]

    for tag in metadata.to_meta_tags():
        if tag.property:
            html_parts.append(
                f'<meta property="{escape(tag.property)}" content="{escape(tag.content)}" />'
            )
        elif tag.name:
            html_parts.append(f'<meta name="{escape(tag.name)}" content="{escape(tag.content)}" />')

    html_parts.append(f'<link rel="canonical" href="{escape(metadata.canonical_url)}" />')

    return "\n    ".join(html_parts)


def render_document(
    metadata: PageMetadata,
    body: str,
    *,
    theme: str,
    head_extra: str = "",
    static_prefix: str = "/static",
) -> str:
    """Render a complete HTML page."""
    meta_html = render_meta_tags_html(metadata)

    return f"""<!DOCTYPE html>
<html lang="en" data-theme="{escape(theme)}" class="{escape(theme)}">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    {meta_html}
    <link rel="stylesheet" href="{escape(static_prefix)}/style.css" />
    {head_extra}
</head>
<body>
{body}
</body>
</html>"""
