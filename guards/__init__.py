"""
Schema validation layer.

Pure predicates that re-check the shape of untyped data at a trust
boundary (documents read from the store, parsed JSON bodies):

- primitives: scalar and structural refinements (URL, email, ISO dates, ...)
- enums: membership guards derived from the schema enumerations
- entities: per-document guards and ``parse_*`` helpers
- api: response envelope guards and constructors
"""
