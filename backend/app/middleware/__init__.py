# Middleware package init
"""
Aviary Backend — Middleware Package
=====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    1. Request ID first: every later log line can read it from the ContextVar
    2. Access log: records method, path, status and duration under that ID
"""
