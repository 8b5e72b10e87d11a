"""
Astro — Services Layer
=======================

Business logic between the routes (HTTP) and the database (persistence).

Service Inventory:
    - ConfigService:   dashboard payload and settings
    - ServiceCatalog:  start page tiles (the "Service" entity)
    - CategoryService: tile groups
    - NoteService:     dashboard notes
    - LinkService:     bookmark bar
    - ThemeService:    colour palettes
    - LogoService:     logo upload validation and storage

Each module exposes a stateless singleton (`config_service`,
`service_catalog`, ...) that route handlers call with the request's session.
"""
