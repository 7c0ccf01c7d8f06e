"""
Hyperactive — ergonomic helpers for ASGI request handlers.

Application package root. Sits between the Starlette request/response
model and route handler code, removing the boilerplate around query
parameters, JSON responses, CORS preflight and error rendering.

Layers:
    - domain: Error taxonomy and CORS policy values. No framework imports.
    - interfaces: Request/response helpers and the example request router.
    - infrastructure: Outbound HTTP client helpers (httpx).
    - shared: Cross-cutting concerns (error rendering, logging).
    - core: Configuration.
"""

__version__ = "0.1.0"
