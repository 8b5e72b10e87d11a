"""
Astro — Sample Data
====================

What:  The starter dashboard (`SAMPLE_CONFIG`) and the two built-in palettes
       (`SAMPLE_THEMES`).
Who:   `astro.seed` writes them to the database; the client uses
       SAMPLE_THEMES as the fallback before the server's themes arrive.

Kept free of database imports so `astro.client` can use it on its own.
"""

from typing import Any, Dict

SAMPLE_THEMES: Dict[str, Dict[str, Dict[str, str]]] = {
    "dark": {
        "background": {"primary": "#0D0E10", "secondary": "#16181C"},
        "text": {"primary": "#F5F5F5", "secondary": "#8A8F98"},
        "border": {"primary": "#26292E", "secondary": "#33373D"},
        "accent": {"primary": "#4C6EF5", "secondary": "#748FFC"},
    },
    "light": {
        "background": {"primary": "#FFFFFF", "secondary": "#F4F5F7"},
        "text": {"primary": "#17181A", "secondary": "#5E6066"},
        "border": {"primary": "#E6E8EB", "secondary": "#D4D7DC"},
        "accent": {"primary": "#3B5BDB", "secondary": "#5C7CFA"},
    },
}

DEFAULT_THEME_ID = "dark"

# Bundled image shown for services without an uploaded logo
PLACEHOLDER_LOGO = "logoPlaceHolder.png"

SAMPLE_CONFIG: Dict[str, Any] = {
    "title": "Astro",
    "subtitle": "Your services, one page away",
    "columns": 4,
    "categories": [
        {
            "name": "Home Lab",
            "icon": "CubeIcon",
            "services": [
                {
                    "name": "Router",
                    "description": "Network admin panel",
                    "url": "http://192.168.1.1",
                    "tags": ["network"],
                },
            ],
        },
    ],
    "notes": [
        {
            "title": "Welcome",
            "content": "Open Manage to add services, categories and notes.",
        },
    ],
    "links": [
        {"label": "GitHub", "url": "https://github.com", "icon": "GitHubLogoIcon"},
    ],
}


def sample_theme(theme_id: str) -> Dict[str, Any]:
    """A built-in theme as an API-shaped dict ({"id": ..., "background": ...})."""
    return {"id": theme_id, **SAMPLE_THEMES[theme_id]}
