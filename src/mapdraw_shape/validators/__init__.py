"""Shape validation.

- topology: simple-polygon check and repair via polygonization
- diagnostics: human-readable report of dropped/repaired loops
"""
