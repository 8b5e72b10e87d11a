"""Active theme resolution."""

from typing import Any, Dict, List, Optional

from astro.sample_data import DEFAULT_THEME_ID, SAMPLE_THEMES, sample_theme


def resolve_active_theme(
    themes: Optional[List[Dict[str, Any]]],
    active_theme: Optional[str],
) -> Dict[str, Any]:
    """
    Pick the palette to render with.

    Order: the server theme whose id matches the local preference, then the
    built-in theme of that name, then the built-in dark theme. `themes` is
    None until the theme store has synced.
    """
    if themes and active_theme:
        for theme in themes:
            if theme.get("id") == active_theme:
                return theme
    if active_theme in SAMPLE_THEMES:
        return sample_theme(active_theme)
    return sample_theme(DEFAULT_THEME_ID)
