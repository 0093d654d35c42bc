"""Geometry building blocks.

- rings: split a flat point stream into closed rings
- simplify: zoom-aware topology-preserving simplification
- convert: host paths <-> shapely geometries
"""
