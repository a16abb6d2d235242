"""Particle identification cuts, as polygons and polynomial curves, for tagged-photon beam detector data."""

__version__ = "0.1.0"
__all__ = [
    "shapes",
    "deuteron_central",
    "pion_forward_late",
    "pion_central_early",
    "pion_central_late",
    "proton_forward_early",
    "proton_forward_late",
]