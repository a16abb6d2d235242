"""Central-detector pion cuts for the 2002 to 2006 data folders."""

from __future__ import annotations

from .shapes import GraphicalCut

_X = "Eclusc_track"
_Y = "Dedx_track"

_CUTS: dict[str, GraphicalCut] = {
    "2002_d1": GraphicalCut(
        "CUTCentrPion_2002_d1",
        (
            (0.0176218, 8.00347), (0.0369627, 6.22396), (0.0670487, 4.70486),
            (0.120774, 3.92361), (0.168052, 3.44618), (0.19384, 3.22917),
            (0.219628, 3.05556), (0.301289, 2.75174), (0.359312, 2.66493),
            (0.447421, 2.70833), (0.498997, 2.1441), (0.498997, 2.1441),
            (0.501146, 1.49306), (0.21533, 1.27604), (0.00902578, 0.972222),
            (0.0111748, 8.00347), (0.0176218, 8.00347), (0.0176218, 8.00347),
        ),
        _X, _Y, "",
    ),
    "2002_d2": GraphicalCut(
        "CUTCentrPion_2002_uv1",
        (
            (0.0171944, 8.08926), (0.0361938, 6.28063), (0.0665928, 4.76371),
            (0.0979417, 3.85939), (0.16159, 3.1301), (0.210038, 2.83839),
            (0.210038, 2.83839), (0.303438, 2.70833), (0.327077, 2.2309),
            (0.331375, 1.79687), (0.318481, 1.49306), (0.32063, 1.36285),
            (0.258309, 1.36285), (0.0515086, 2.10526), (0.0086447, 1.02975),
            (0.00959467, 8.06009), (0.0171944, 8.08926), (0.0171944, 8.08926),
        ),
        _X, _Y, "",
    ),
    "2002_d3": GraphicalCut(
        "CUTCentrPion_2003_d3",
        (
            (0.0283668, 8.09028), (0.0361938, 6.28063), (0.0665928, 4.76371),
            (0.0885387, 3.92361), (0.16159, 3.1301), (0.210038, 2.83839),
            (0.210038, 2.83839), (0.299335, 2.83839), (0.359183, 2.7217),
            (0.402292, 2.49132), (0.425931, 2.1875), (0.432378, 1.88368),
            (0.415186, 1.49306), (0.214788, 1.32147), (0.0563037, 1.71007),
            (0.0086447, 1.02975), (0.00959467, 8.06009), (0.0133238, 7.96007),
            (0.0283668, 8.09028),
        ),
        _X, _Y, "",
    ),
    "2002_uv1": GraphicalCut(
        "CUTCentrPion_2002_uv1",
        (
            (0.0171944, 8.08926), (0.0361938, 6.28063), (0.0665928, 4.76371),
            (0.0979417, 3.85939), (0.16159, 3.1301), (0.210038, 2.83839),
            (0.210038, 2.83839), (0.303438, 2.70833), (0.327077, 2.2309),
            (0.331375, 1.79687), (0.318481, 1.49306), (0.32063, 1.36285),
            (0.258309, 1.36285), (0.0842407, 1.57986), (0.0086447, 1.02975),
            (0.00959467, 8.06009), (0.0171944, 8.08926), (0.0171944, 8.08926),
        ),
        _X, _Y, "",
    ),
    "2002_uv2": GraphicalCut(
        "CUTCentrPion_2002_uv2",
        (
            (-0.0038682, 8.13368), (0.0361938, 6.28063), (0.0665928, 4.76371),
            (0.0885387, 3.92361), (0.16159, 3.1301), (0.210038, 2.83839),
            (0.210038, 2.83839), (0.299335, 2.83839), (0.359183, 2.7217),
            (0.42808, 2.57812), (0.447421, 2.27431), (0.432378, 1.88368),
            (0.415186, 1.49306), (0.214788, 1.32147), (0.0086447, 1.02975),
            (0.00959467, 8.06009), (-0.00171921, 8.26389),
            (-0.0038682, 8.13368),
        ),
        _X, _Y, "",
    ),
    "2002_vis1": GraphicalCut(
        "CUTCentrPion_2002_vis1",
        (
            (0.305587, 1.40625), (0.327077, 1.66667), (0.327077, 2.40451),
            (0.305587, 2.79514), (0.25616, 2.79514), (0.183095, 3.18576),
            (0.140115, 3.35937), (0.0799427, 4.22743), (0.0606017, 5.00868),
            (0.0412607, 5.92014), (0.0240688, 6.9184), (0.00902578, 6.39757),
            (0.0154728, 5.00868), (0.00902578, 3.35937),
            (0.00902578, 1.79687), (0.00902578, 0.972222),
            (0.0563037, 1.97049), (0.0971347, 1.53646), (0.19384, 1.23264),
            (0.292693, 1.36285), (0.307736, 1.31944), (0.305587, 1.40625),
        ),
        _X, _Y, "Graph",
    ),
    "2002_vis2": GraphicalCut(
        "CUTCentrPion_2002_vis2",
        (
            (0.0171944, 8.08926), (0.0361938, 6.28063), (0.0665928, 4.76371),
            (0.0979417, 3.85939), (0.16159, 3.1301), (0.210038, 2.83839),
            (0.210038, 2.83839), (0.279799, 2.70833), (0.344269, 2.27431),
            (0.352865, 1.75347), (0.331375, 1.57986), (0.305587, 1.53646),
            (0.120774, 1.75347), (0.0734957, 1.84028), (0.0086447, 1.02975),
            (0.00959467, 8.06009), (0.0171944, 8.08926), (0.0171944, 8.08926),
        ),
        _X, _Y, "",
    ),
    "2003_vis": GraphicalCut(
        "CUTCentrPion_2003_vis",
        (
            (0.0154728, 8.09028), (0.0348137, 6.31076), (0.0648997, 4.79167),
            (0.0971347, 3.88021), (0.159456, 3.14236), (0.208883, 2.83854),
            (0.208883, 2.83854), (0.292693, 2.62153), (0.290544, 2.57812),
            (0.294842, 2.27431), (0.29914, 2.10069), (0.292693, 1.79687),
            (0.29914, 1.53646), (0.213181, 1.36285), (0.0606017, 1.79687),
            (0.00902578, 0.798611), (0.00902578, 8.09028),
            (0.0154728, 8.09028), (0.0154728, 8.09028),
        ),
        _X, _Y, "",
    ),
    "2005_d1": GraphicalCut(
        "CUTCentrPion_2005_d1",
        (
            (0.0154728, 8.09028), (0.0348137, 6.31076), (0.0648997, 4.79167),
            (0.0971347, 3.88021), (0.159456, 3.14236), (0.208883, 2.83854),
            (0.208883, 2.83854), (0.29914, 2.83854), (0.303438, 2.79514),
            (0.309885, 2.57812), (0.305587, 2.31771), (0.305587, 1.97049),
            (0.281948, 1.49306), (0.213181, 1.36285), (0.0928367, 1.53646),
            (0.00902578, 0.798611), (0.00902578, 8.09028),
            (0.0154728, 8.09028), (0.0154728, 8.09028),
        ),
        _X, _Y, "",
    ),
    "2005_d2": GraphicalCut(
        "CUTCentrPion_2005_d2",
        (
            (0.0154728, 0.928819), (0.0412607, 1.05903), (0.0541547, 1.49306),
            (0.0648997, 1.97049), (0.148711, 1.44965), (0.238968, 1.44965),
            (0.296991, 1.53646), (0.329226, 1.88368), (0.337822, 2.1441),
            (0.318481, 2.57812), (0.275647, 2.65928), (0.236853, 2.83241),
            (0.17046, 3.36331), (0.138414, 3.86691), (0.103903, 4.19065),
            (0.0477077, 5.2691), (0.0197708, 6.00694), (0.0197708, 6.35417),
            (0.0176218, 4.53125), (0.0133238, 2.1441), (0.0154728, 0.755208),
            (0.0154728, 0.755208), (0.0154728, 0.928819),
        ),
        _X, _Y, "Graph",
    ),
    "2006_d": GraphicalCut(
        "CUTCentrPion_2006_d",
        (
            (0.0280917, 1.31944), (0.0484212, 2.62153), (0.0853839, 1.97049),
            (0.114954, 1.71007), (0.175943, 1.71007), (0.26835, 1.71007),
            (0.331186, 1.71007), (0.349668, 1.97049), (0.353364, 2.44792),
            (0.308682, 2.83854), (0.29235, 2.92535), (0.259685, 3.22917),
            (0.214771, 3.40278), (0.165774, 3.40278), (0.114954, 3.83681),
            (0.0816877, 4.22743), (0.05951, 5.22569), (0.0521175, 6.05035),
            (0.0391805, 7.09201), (0.0243954, 8.00347), (0.0133066, 8.95833),
            (0.018851, 6.70139), (0.0170029, 3.96701), (0.0170029, 2.27431),
            (0.0170029, 0.755208), (0.0225473, 0.798611),
            (0.0170029, 0.885417), (0.0280917, 1.31944),
        ),
        _X, _Y, "Graph",
    ),
}


def late_pion_central_cuts() -> dict[str, GraphicalCut]:
    """Return the 2002-2006 central pion cuts, keyed by data folder."""
    return dict(_CUTS)