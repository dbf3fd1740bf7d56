"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource uses (DB wiring, table
definitions, field validation, body parsing). Resource-specific SQL and rules
live in the resource packages (e.g. `students/`).
"""
