"""
Interfaces layer package.

Contains the request/response helpers handed to route handlers and
the example request router. No business logic belongs here.
"""
