"""
Shared module package.

Contains cross-cutting concerns used across layers:
- Error rendering (taxonomy to HTTP response)
- Logging configuration
"""
