"""Free-hand figure-eight drag: proof of concept.

The user drags once across the map and crosses their own stroke:

   (2,0) ---- (2,2)
       \\      /
        \\    /
         (1,1)      <- stroke crosses itself here
        /    \\
       /      \\
   (0,0)      (0,2)

(lat, lng) in degrees. The engine splits the stroke into two triangles.
"""

from mapdraw_shape import LatLng, build_shape_result, process_polygon
from mapdraw_shape.validators.diagnostics import diagnose_shape

drag = [
    LatLng(lat=0, lng=0),
    LatLng(lat=2, lng=2),
    LatLng(lat=0, lng=2),
    LatLng(lat=2, lng=0),
]

# --- Diagnose ---
issues = diagnose_shape(drag, drawn=True, zoom=8)
if issues:
    print("⚠️  Shape issues:")
    for i in issues:
        print(f"  [{i.severity}] {i.element_type} {i.element_id}: {i.message}")
else:
    print("✅ Shape is clean")

# --- Process ---
result = build_shape_result(process_polygon(drag, simplify_zoom=8))
if result.is_empty:
    print("❌ Shape could not be created")
else:
    print(f"📐 Polygons: {len(result.polygons)}")
    for n, polygon in enumerate(result.polygons):
        print(f"   #{n}: {[(p.lat, p.lng) for p in polygon]}")
    print(f"   Delete marker at: {result.highest_point}")
    print(f"   Callback records: {len(result.records)}")
