"""Graph primitives and helpers.

This package provides the entity model (`components`), the constraint flags
(`constraints`), the `Graph` container (`graph`), paths and cycles (`path`),
generators (`factory`) and NetworkX interoperability (`convert`).
"""
