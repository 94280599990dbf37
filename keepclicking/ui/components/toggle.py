"""
Theme toggle control and the inline script that keeps it in sync.

Without JavaScript the toggle is a plain form posting to /theme/toggle.
With JavaScript, changing the checkbox calls window.__setPreferredTheme,
which updates the page, local storage and the theme cookie in place.
"""

from __future__ import annotations

import json

from keepclicking.domain.entities import ThemeVariant
from keepclicking.ui.html import escape

TOGGLE_ACTION = "/theme/toggle"


def render_toggle(theme: ThemeVariant, *, next_path: str, static_prefix: str = "/static") -> str:
    """Checkbox toggle: checked means dark (moon icon), unchecked light (sun icon)."""
    checked = " checked" if theme == "dark" else ""
    icon = "moon" if theme == "dark" else "sun"
    prefix = escape(static_prefix)

    return f"""<form class="theme-toggle" method="post" action="{TOGGLE_ACTION}">
  <input type="hidden" name="next" value="{escape(next_path)}" />
  <label class="theme-toggle__track theme-toggle--{icon}">
    <input id="theme-toggle" type="checkbox" name="checked" value="on"{checked}
      aria-label="Switch between Dark and Light mode"
      onchange="window.__setPreferredTheme(this.checked ? 'dark' : 'light')" />
    <img class="theme-toggle__icon theme-toggle__icon--checked" src="{prefix}/moon.svg"
      width="16" height="16" role="presentation" style="pointer-events: none" />
    <img class="theme-toggle__icon theme-toggle__icon--unchecked" src="{prefix}/sun.svg"
      width="16" height="16" role="presentation" style="pointer-events: none" />
  </label>
  <noscript><button type="submit">Toggle theme</button></noscript>
</form>"""


def render_toggle_placeholder() -> str:
    """Keeps the header height stable when no theme store is attached."""
    return '<div class="theme-toggle-placeholder" style="height: 24px"></div>'


def render_theme_script(storage_key: str = "theme", max_age_seconds: int = 31536000) -> str:
    """Inline <head> script applying the stored theme before first paint."""
    key = json.dumps(storage_key)

    return f"""<script>
(function() {{
  var key = {key};
  function apply(theme) {{
    var root = document.documentElement;
    root.setAttribute('data-theme', theme);
    root.className = theme;
    var box = document.getElementById('theme-toggle');
    if (box) box.checked = theme === 'dark';
  }}
  window.__theme = document.documentElement.getAttribute('data-theme');
  window.__setPreferredTheme = function(theme) {{
    window.__theme = theme;
    apply(theme);
    try {{ localStorage.setItem(key, theme); }} catch (e) {{}}
    document.cookie = key + '=' + theme + '; path=/; max-age={max_age_seconds}; samesite=lax';
  }};
  var preferred = null;
  try {{ preferred = localStorage.getItem(key); }} catch (e) {{}}
  if (preferred === 'light' || preferred === 'dark') {{
    window.__theme = preferred;
    document.addEventListener('DOMContentLoaded', function() {{ apply(preferred); }});
    apply(preferred);
  }}
}})();
</script>"""
