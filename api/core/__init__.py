"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, error mapping, record SQL, mail). Keep feature-specific rules
in the corresponding feature package (e.g. `feedings/`).
"""
