"""
Domain layer package.

Contains the error taxonomy and the CORS policy value object.
No framework imports, no IO, no side effects.
"""
