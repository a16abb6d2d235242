"""Forward-detector pion cuts for the 2002 data folders."""

from __future__ import annotations

from .shapes import GraphicalCut

_CUTS: dict[str, GraphicalCut] = {
    "2002_d1": GraphicalCut(
        "CUTForwPion_2002_d1",
        (
            (9.08407, 4.98485), (9.14823, 11.2159), (10.0465, 12.9962),
            (10.7522, 10.7708), (10.9447, 8.54545), (11.1372, 5.875),
            (9.08407, 4.98485),
        ),
        "Tof_trf", "De_trf", "Graph",
    ),
    "2002_d2": GraphicalCut(
        "CUTForwPion_2002_d2",
        (
            (8.82633, 5.00947), (8.65155, 9.36553), (10.1372, 12.0881),
            (11.7976, 9.36553), (11.7102, 3.92045), (9.96239, 2.83144),
            (9.00111, 5.00947), (8.91372, 6.64299), (8.82633, 5.00947),
        ),
        "Tof_trf", "De_trf", "Graph",
    ),
    "2002_d3": GraphicalCut(
        "CUTForwPion_2002_d3",
        (
            (8.84956, 9.60439), (9.84071, 11.1841), (10.4779, 10.8681),
            (10.9027, 8.97253), (11.0442, 6.12912), (10.7611, 4.54945),
            (10.1239, 3.91758), (9.27434, 4.23352), (8.92035, 4.54945),
            (8.84956, 9.60439),
        ),
        "Tof_trf", "De_trf", "Graph",
    ),
    "2002_uv1": GraphicalCut(
        "CUTForwPion_2002_uv1",
        (
            (11.8673, 6.07718), (11.8673, 10.1018), (11.1162, 11.9129),
            (10.2041, 12.3153), (9.23838, 11.108), (8.80918, 8.69318),
            (8.86283, 4.66856), (8.86283, 2.65625), (9.66759, 1.65009),
            (11.0088, 1.65009), (11.76, 1.44886), (11.9746, 4.66856),
            (11.8673, 7.08333), (11.8673, 9.09564), (11.8673, 6.07718),
        ),
        "Tof_trf", "De_trf", "Graph",
    ),
    "2002_uv2": GraphicalCut(
        "CUTForwPion_2002_uv2",
        (
            (9.71498, 15.883), (10.1558, 18.7234), (11.618, 14.3351),
            (11.5577, 5.0277), (10.1558, -1.75532), (8.99838, 5.0277),
            (9.40787, 10.741), (9.71498, 15.883),
        ),
        "Tof_trf", "De_trf", "Graph",
    ),
    "2002_vis1": GraphicalCut(
        "CUTForwPion2002_vis1",
        (
            (8.42478, 7.93681), (9.34513, 11.6456), (10.6195, 10.9038),
            (11.0442, 9.42033), (11.1858, 6.08242), (9.9823, 4.22802),
            (9.48673, 4.22802), (8.28319, 5.34066), (8.56637, 9.04945),
            (8.42478, 7.93681),
        ),
        "Tof_trf", "De_trf", "Graph",
    ),
    "2002_vis2": GraphicalCut(
        "CUTForwPion_2002_vis2",
        (
            (8.51217, 4.08791), (9.9458, 2.95238), (11.5586, 4.08791),
            (11.7378, 8.63004), (10.7522, 10.3333), (9.85619, 10.3333),
            (8.78097, 8.06227), (8.51217, 7.21062), (8.51217, 4.08791),
        ),
        "tof_trf", "De_trf", "Graph",
    ),
}


def late_pion_forward_cuts() -> dict[str, GraphicalCut]:
    """Return the 2002 forward pion cuts, keyed by data folder."""
    return dict(_CUTS)