# Routes package init
"""
Aviary Backend — API Routes Package
=====================================

Route Inventory:
    - birds.py:   GET /birds          (all birds as JSON)
                  GET /birds/plain    (all birds as plain text)
    - health.py:  GET /health         (service health check)

Routes stay thin: pick the render mode, call the service, return the payload.
"""
