"""Central-detector pion cuts for the 1998 to 2001 data folders."""

from __future__ import annotations

from .shapes import GraphicalCut

_X = "Eclusc_track"
_Y = "Dedx_track"

_CUTS: dict[str, GraphicalCut] = {
    "1998_uv": GraphicalCut(
        "CUTCentrPion_1998_uv",
        (
            (0.0133238, 7.96007), (0.0369627, 5.92014), (0.0541547, 4.14062),
            (0.133668, 3.27257), (0.168052, 2.83854), (0.202436, 2.75174),
            (0.254011, 2.66493), (0.301289, 2.53472), (0.350716, 2.31771),
            (0.34212, 2.31771), (0.34212, 2.10069), (0.337822, 1.97049),
            (0.32063, 1.44965), (0.213181, 1.36285), (0.116476, 1.57986),
            (0.0412607, 2.70833), (0.00687678, 1.05903), (0.00902578, 8.09028),
            (0.0154728, 8.09028), (0.0133238, 7.96007),
        ),
        _X, _Y, "",
    ),
    "1999_d1": GraphicalCut(
        "CUTCentrPion_1999_d1",
        (
            (0.0171944, 8.08926), (0.0361938, 6.28063), (0.0665928, 4.76371),
            (0.105731, 3.57639), (0.16159, 3.1301), (0.21533, 3.09896),
            (0.221776, 3.01215), (0.307736, 2.70833), (0.357163, 2.62153),
            (0.372206, 2.36111), (0.367908, 2.40451), (0.355014, 1.71007),
            (0.324928, 1.62326), (0.241117, 1.62326), (0.0477077, 1.84028),
            (0.0086447, 1.02975), (0.00959467, 8.06009), (0.0171944, 8.08926),
            (0.0171944, 8.08926),
        ),
        _X, _Y, "",
    ),
    "1999_d2": GraphicalCut(
        "CUTCentrPion_1999_d2",
        (
            (0.0305158, 7.26562), (0.0412607, 6.39757), (0.0885387, 4.22743),
            (0.142264, 3.61979), (0.191691, 3.27257), (0.228223, 3.05556),
            (0.254011, 2.88194), (0.305587, 2.92535), (0.36361, 2.83854),
            (0.447421, 2.57812), (0.456017, 2.1875), (0.453868, 1.92708),
            (0.451719, 1.57986), (0.219628, 1.44965), (0.0627507, 1.75347),
            (0.0133238, 1.14583), (0.0154728, 8.17708), (0.0283668, 7.65625),
            (0.0305158, 7.26562),
        ),
        _X, _Y, "",
    ),
    "1999_uv": GraphicalCut(
        "CUTCentrPion_1999_uv",
        (
            (0.00687678, 7.78646), (0.0434097, 5.44271), (0.0648997, 4.79167),
            (0.116476, 3.7934), (0.159456, 3.14236), (0.202436, 3.01215),
            (0.21533, 3.05556), (0.29914, 2.83854), (0.357163, 2.75174),
            (0.443123, 2.62153), (0.473209, 2.44792), (0.503295, 2.27431),
            (0.498997, 1.57986), (0.213181, 1.36285), (0.0648997, 1.62326),
            (0.0133238, 0.928819), (0.00902578, 8.09028),
            (0.00687678, 7.82986), (0.00687678, 7.78646),
        ),
        _X, _Y, "",
    ),
    "1999_vis": GraphicalCut(
        "CUTCentrPion_1999_vis",
        (
            (0.0154728, 1.05903), (0.0369627, 1.53646), (0.0520057, 2.53472),
            (0.0734957, 2.1441), (0.142264, 1.66667), (0.23467, 1.53646),
            (0.29914, 1.44965), (0.32063, 2.2309), (0.281948, 2.75174),
            (0.238968, 3.01215), (0.191691, 3.01215), (0.146562, 3.22917),
            (0.112178, 3.61979), (0.0799427, 4.40104), (0.0412607, 5.57292),
            (0.0219198, 6.9184), (0.0154728, 5.52951), (0.0154728, 3.27257),
            (0.0176218, 2.40451), (0.0176218, 0.928819), (0.0154728, 1.05903),
        ),
        _X, _Y, "Graph",
    ),
    "2000_fuv": GraphicalCut(
        "CUTCentrPion_2000_fuv",
        (
            (0.0170259, 8.09557), (0.0353448, 6.29501), (0.0541547, 4.74826),
            (0.0648997, 3.7934), (0.0885387, 3.35937), (0.112178, 3.01215),
            (0.178797, 2.79514), (0.284097, 2.79514), (0.314183, 2.40451),
            (0.309885, 1.97049), (0.316332, 1.79687), (0.301289, 1.62326),
            (0.245415, 1.62326), (0.142264, 1.62326), (0.0584527, 1.97049),
            (0.00840516, 1.03186), (0.00948275, 8.06094),
            (0.0170259, 8.09557), (0.0170259, 8.09557),
        ),
        _X, _Y, "",
    ),
    "2000_uv1": GraphicalCut(
        "CUTCentrPion_2000_uv1",
        (
            (0.0176218, 7.74306), (0.0348137, 6.31076), (0.0648997, 4.79167),
            (0.0820917, 3.48958), (0.159456, 3.14236), (0.208883, 2.83854),
            (0.208883, 2.83854), (0.29914, 2.83854), (0.296991, 2.75174),
            (0.301289, 2.53472), (0.303438, 2.36111), (0.309885, 2.10069),
            (0.305587, 1.53646), (0.213181, 1.36285), (0.0520057, 1.88368),
            (0.00687678, 1.05903), (0.00902578, 8.09028),
            (0.0154728, 8.09028), (0.0176218, 7.74306),
        ),
        _X, _Y, "",
    ),
    "2000_uv2": GraphicalCut(
        "CUTCentrPion_2000_uv2",
        (
            (0.0154728, 7.91667), (0.0348137, 6.13715), (0.0648997, 4.61806),
            (0.0971347, 3.7066), (0.163754, 3.35937), (0.191691, 3.18576),
            (0.236819, 2.96875), (0.29914, 2.66493), (0.357163, 2.57812),
            (0.415186, 2.27431), (0.417335, 1.44965), (0.372206, 1.44965),
            (0.25616, 1.44965), (0.0520057, 1.75347), (0.00687678, 0.885417),
            (0.00902578, 7.91667), (0.0154728, 7.91667), (0.0154728, 7.91667),
        ),
        _X, _Y, "",
    ),
    "2000_vis": GraphicalCut(
        "CUTCentrPion_2000_vis",
        (
            (0.0336483, 7.6551), (0.0509039, 6.3257), (0.0656943, 3.99926),
            (0.156902, 3.40842), (0.17539, 3.18685), (0.224692, 2.89143),
            (0.224692, 2.89143), (0.267831, 2.66987), (0.280156, 2.33752),
            (0.282621, 2.15288), (0.276458, 1.85746), (0.269063, 1.48818),
            (0.246878, 1.3774), (0.228389, 1.3774), (0.0656943, 2.07902),
            (0.0176253, 0.934269), (0.0114626, 7.43353), (0.0213229, 7.83973),
            (0.0336483, 7.6551),
        ),
        _X, _Y, "",
    ),
    "2001_d": GraphicalCut(
        "CUTCentrPion_2001_d",
        (
            (0.0197708, 8.4375), (0.0391117, 6.65799), (0.0713467, 5.09549),
            (0.0992837, 3.88021), (0.176648, 2.79514), (0.217479, 2.83854),
            (0.236819, 2.79514), (0.301289, 2.75174), (0.314183, 2.27431),
            (0.316332, 2.1441), (0.318481, 2.01389), (0.314183, 1.92708),
            (0.29914, 1.44965), (0.221776, 1.36285), (0.155158, 1.53646),
            (0.118625, 1.79687), (0.0563037, 2.27431), (0.00902578, 0.711805),
            (0.0133238, 8.4375), (0.0197708, 8.4375), (0.0197708, 8.4375),
        ),
        _X, _Y, "",
    ),
    "2001_uv": GraphicalCut(
        "CUTCentrPion_2001_uv",
        (
            (0.0391117, 6.13715), (0.0369627, 6.31076), (0.0563037, 4.87847),
            (0.0799427, 3.18576), (0.146562, 2.92535), (0.208883, 2.88194),
            (0.208883, 2.88194), (0.296991, 2.88194), (0.309885, 2.75174),
            (0.318481, 2.53472), (0.331375, 2.2309), (0.327077, 1.79687),
            (0.312034, 1.44965), (0.21533, 1.40625), (0.118625, 1.49306),
            (0.0563037, 1.92708), (0.00902578, 1.10243),
            (0.00902578, 8.13368), (-0.0124642, 8.04687),
            (0.0176218, 7.09201), (0.0434097, 6.00694), (0.0412607, 5.96354),
            (0.0369627, 6.18056), (0.0391117, 6.13715),
        ),
        _X, _Y, "",
    ),
}


def early_pion_central_cuts() -> dict[str, GraphicalCut]:
    """Return the 1998-2001 central pion cuts, keyed by data folder."""
    return dict(_CUTS)