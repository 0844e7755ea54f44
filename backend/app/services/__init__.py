# Services package init
"""
Aviary Backend — Services Layer
=================================

What:  Logic sitting between routes (HTTP) and the database (persistence).
Why:   Routes handle HTTP; services read the store and shape payloads.

Service Inventory:
    - BirdService: Reads the bird store (list, count)
    - bird_renderer: Builds the JSON payload for each render mode and the
      plain-text body
"""
