"""
Astro — API Routes Package
===========================

Route Inventory (all under /api):
    - config.py:      GET/PATCH  /config
    - services.py:    /service, /service/{id}
    - categories.py:  /category, /category/{id}
    - notes.py:       /note, /note/{id}
    - links.py:       /link, /link/{id}
    - themes.py:      /theme, /theme/{id}
    - logos.py:       POST /logo, GET /logos/{path}
    - manage.py:      GET /manage/{entity}
    - health.py:      GET /healthz

Routes stay thin: extract input, call the service singleton, shape the
response. Business rules live in astro.services.
"""
