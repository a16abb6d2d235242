"""Forward-detector proton cuts for the 2002 to 2006 data folders."""

from __future__ import annotations

from .shapes import GraphicalCut

_CUTS: dict[str, GraphicalCut] = {
    "2002_d1": GraphicalCut(
        "CutForwPro_2002_d1",
        (
            (28.6527, 65.9602), (26.9845, 54.8333), (25.958, 47.267),
            (24.354, 39.7008), (22.1726, 34.3598), (19.6704, 26.7936),
            (17.2323, 24.5682), (14.6659, 19.2273), (13.0619, 17.0019),
            (12.8053, 14.3314), (12.9978, 8.10038), (15.7566, 8.10038),
            (20.1195, 16.5568), (21.8518, 20.5625), (24.6106, 25.9034),
            (26.792, 33.4697), (28.4602, 39.7008), (29.2942, 45.9318),
            (31.5398, 37.4754), (34.1704, 29.464), (38.2765, 20.1174),
            (41.1637, 16.1117), (44.3717, 14.3314), (48.3496, 12.1061),
            (45.1416, 19.6723), (42.0619, 23.233), (37.5066, 34.8049),
            (34.4912, 46.3769), (32.5664, 52.1629), (30.1925, 63.2898),
            (29.1659, 68.1856), (28.9093, 66.8504), (28.6527, 65.9602),
        ),
        "ddxtof_fow_2002_d1", "", "Graph",
    ),
    "2002_d2": GraphicalCut(
        "CutForwPro_2002_d2",
        (
            (13.021, 14.2661), (13.6327, 5.55398), (16.6914, 9.91004),
            (20.7987, 18.0777), (24.0321, 21.8892), (26.5664, 33.8684),
            (28.2268, 44.214), (29.1007, 49.1146), (31.4602, 36.0464),
            (34.6062, 27.3343), (37.1405, 20.8002), (40.1117, 13.1771),
            (47.1029, 6.09848), (49.0254, 12.6326), (45.2677, 15.8996),
            (42.5586, 22.4337), (39.2378, 29.5123), (36.7035, 37.1354),
            (33.2954, 46.392), (31.1106, 57.8267), (29.7998, 65.4498),
            (28.052, 63.2718), (26.479, 51.8371), (24.469, 39.3134),
            (21.4104, 28.9678), (17.8274, 24.0672), (15.2058, 19.7112),
            (12.7588, 13.7216), (12.7588, 13.7216), (13.021, 14.2661),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2002_d3": GraphicalCut(
        "CutForwPro_2002_d3",
        (
            (27.5738, 60.3358), (27.9646, 65.0795), (27.9646, 65.0795),
            (29.0265, 62.7926), (30.0177, 57.5653), (32.5664, 46.7841),
            (35.0442, 39.5966), (38.7257, 30.1222), (43.469, 21.9545),
            (47.292, 14.767), (52.1062, 10.8466), (47.292, 9.86648),
            (43.1858, 13.4602), (40.5664, 18.0341), (36.9558, 24.8949),
            (34.6195, 31.1023), (31.9547, 37.4011), (29.8287, 46.2222),
            (28.9912, 49.4565), (28.1062, 44.1705), (26.3497, 33.5787),
            (23.646, 24.8949), (19.823, 16.7273), (17.2743, 13.7869),
            (14.7257, 10.1932), (12.177, 7.90625), (11.1858, 6.59943),
            (11.1858, 10.8466), (13.6637, 14.1136), (16.7788, 18.0341),
            (21.0973, 29.142), (22.9381, 35.0227), (25.5575, 43.517),
            (27.1228, 55.6312), (27.469, 60.179), (27.469, 60.179),
            (27.5738, 60.3358),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2002_uv1": GraphicalCut(
        "CutForwPro_2002_uv1",
        (
            (29.089, 67.0502), (31.396, 60.6108), (32.5227, 52.5616),
            (34.5077, 43.5062), (36.7611, 34.2495), (39.9264, 27.8101),
            (42.9845, 22.5781), (45.667, 18.151), (45.9889, 16.1387),
            (41.7506, 15.3338), (39.4972, 15.9375), (37.2439, 19.7609),
            (34.776, 26.4015), (32.9519, 32.2372), (31.5033, 38.0729),
            (30.2157, 45.5185), (29.25, 51.5554), (27.9087, 43.1037),
            (26.6211, 36.4631), (25.4408, 32.4384), (23.9386, 28.6151),
            (21.7389, 23.1818), (20.1831, 19.9621), (18.4126, 17.3461),
            (16.6421, 14.1264), (15.0863, 12.3153), (13.906, 10.5043),
            (13.1012, 10.1018), (12.0282, 7.48579), (11.5454, 10.5043),
            (13.2085, 15.3338), (15.891, 18.5535), (17.3933, 22.5781),
            (20.505, 29.2187), (22.2218, 36.4631), (24.2069, 43.9086),
            (26.2992, 52.7628), (27.8014, 62.4219), (28.3916, 64.8366),
            (29.089, 66.4465), (29.089, 67.0502),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2002_uv2": GraphicalCut(
        "CutForwPro_2002_uv2",
        (
            (12.9889, 15.0), (15.5741, 18.9062), (18.0332, 22.8125),
            (20.177, 28.2812), (22.3208, 35.3125), (23.708, 41.5625),
            (26.167, 50.9375), (27.5542, 67.3437), (29.0044, 72.8125),
            (30.4546, 65.0), (31.9679, 57.9687), (34.3009, 51.7187),
            (35.2467, 43.9062), (37.3274, 38.4375), (40.2909, 29.0625),
            (42.5608, 25.9375), (45.5874, 21.25), (47.8573, 18.125),
            (50.8208, 13.4375), (53.8473, 11.875), (49.4336, 4.84375),
            (47.2898, 4.84375), (44.9569, 4.84375), (42.75, 9.53125),
            (39.8496, 14.2187), (38.3363, 18.9062), (35.7511, 24.375),
            (32.8507, 32.1875), (31.0852, 40.0), (29.7611, 44.6875),
            (29.2566, 48.5937), (28.1847, 38.4375), (26.6715, 32.1875),
            (22.6361, 17.3437), (20.1139, 11.875), (18.3485, 9.53125),
            (14.5022, 8.75), (12.2323, 8.75), (12.1692, 13.4375),
            (12.9889, 15.0),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2002_vis1": GraphicalCut(
        "CutForwPro_2002_vis1",
        (
            (12.3894, 5.44602), (11.5398, 10.4318), (13.9469, 15.4176),
            (16.4956, 18.1023), (19.469, 26.5398), (22.5133, 32.6761),
            (25.1327, 44.9489), (26.6903, 54.9205), (27.823, 66.4261),
            (28.6726, 71.4119), (30.5841, 61.0568), (32.9204, 51.8523),
            (34.6903, 45.7159), (35.8938, 40.7301), (38.2301, 34.9773),
            (41.2035, 28.0739), (44.3186, 23.4716), (49.1327, 16.5682),
            (52.177, 13.8835), (56.6372, 9.28125), (53.0973, 3.91193),
            (49.4159, 6.21307), (46.4425, 7.36364), (42.9027, 12.3494),
            (39.3628, 16.1847), (36.6018, 25.0057), (34.1239, 30.7585),
            (32.0, 37.2784), (30.5841, 44.1818), (29.2389, 49.5511),
            (28.177, 42.6477), (27.1858, 36.5114), (24.7788, 28.0739),
            (22.7257, 23.0881), (20.0354, 15.8011), (18.2655, 15.0341),
            (16.0708, 11.1989), (14.3717, 7.74716), (12.3894, 5.82954),
            (12.3894, 5.44602),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2002_vis2": GraphicalCut(
        "CUTG",
        (
            (12.0559, 12.4369), (14.7762, 18.1571), (17.8057, 24.0619),
            (21.0206, 30.8893), (23.1226, 36.9786), (25.9048, 45.2821),
            (27.5122, 56.7226), (28.0068, 59.8595), (28.3778, 62.0738),
            (28.8106, 62.9964), (31.2217, 54.5083), (33.1383, 47.3119),
            (37.6516, 32.919), (40.7428, 26.2762), (46.1834, 18.3417),
            (50.1403, 13.544), (51.7477, 11.3298), (45.5652, 10.9607),
            (42.7212, 13.544), (42.4739, 14.2821), (37.9607, 22.0321),
            (35.0549, 28.306), (33.8802, 31.9964), (33.5711, 32.919),
            (33.5711, 32.919), (30.1707, 45.0976), (29.4288, 47.681),
            (28.1305, 38.4548), (24.7919, 27.7524), (20.2787, 17.2345),
            (17.2492, 12.9905), (12.4269, 5.79405), (11.9941, 10.7762),
            (12.0559, 12.4369),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2003_vis": GraphicalCut(
        "CutForwPro_2003_vis",
        (
            (28.7367, 62.3802), (27.708, 59.099), (27.365, 53.6302),
            (25.8562, 46.3385), (24.9646, 41.0521), (22.7013, 33.7604),
            (20.5066, 29.2031), (18.1748, 23.7344), (16.2544, 19.9062),
            (14.7456, 16.9896), (14.1969, 15.349), (11.6593, 11.7031),
            (11.2478, 9.88021), (11.2478, 4.59375), (14.6084, 8.23958),
            (18.7235, 15.1667), (21.3982, 20.2708), (23.8673, 24.099),
            (25.7876, 30.6615), (27.4336, 38.1354), (28.4624, 42.875),
            (29.4226, 47.25), (30.5885, 43.0573), (31.5487, 37.7708),
            (34.2235, 32.3021), (36.2124, 27.3802), (38.75, 21.9115),
            (41.0819, 18.0833), (43.8938, 13.3437), (46.0199, 10.974),
            (50.6836, 11.1562), (46.1571, 17.1719), (43.1394, 21.9115),
            (40.3274, 25.9219), (36.7611, 34.8542), (33.8805, 43.2396),
            (31.823, 51.625), (31.0686, 56.1823), (29.8341, 60.5573),
            (28.8053, 62.1979), (28.7367, 62.3802),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2005_d1": GraphicalCut(
        "CutForwPro_2005_d1",
        (
            (32.9292, 4.17377), (24.6969, 5.70076), (19.7035, 4.17377),
            (16.1947, 3.66477), (13.9679, 14.8627), (12.5509, 34.2045),
            (12.3485, 54.0554), (12.6184, 77.9782), (13.4956, 97.8291),
            (16.5321, 126.333), (19.3662, 87.6491), (20.7157, 60.6723),
            (23.1449, 48.9654), (24.2246, 28.6056), (28.0708, 19.9527),
            (29.7577, 10.7907), (32.5243, 4.68276), (32.5243, 4.68276),
            (32.9292, 4.17377),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2005_d2": GraphicalCut(
        "CutForwPro_2005_d2",
        (
            (11.8407, 4.49148), (11.8407, 10.6562), (13.8119, 12.858),
            (17.2765, 15.5), (20.1438, 22.5455), (22.7124, 29.1506),
            (24.5642, 36.196), (26.0575, 43.6818), (27.5509, 56.4517),
            (28.5066, 59.9744), (30.6571, 49.4062), (33.9425, 35.7557),
            (37.5863, 27.8295), (41.0509, 22.1051), (44.3363, 16.821),
            (46.7854, 15.5), (48.9956, 12.4176), (50.9071, 12.4176),
            (46.9646, 8.0142), (43.9181, 8.45454), (40.4535, 10.2159),
            (37.4071, 15.5), (34.0619, 21.2244), (32.4491, 25.6278),
            (29.9403, 33.1136), (29.4027, 36.6364), (28.7456, 39.7187),
            (27.969, 33.9943), (26.6549, 25.1875), (23.25, 17.2614),
            (20.8009, 12.858), (17.7544, 9.33523), (16.2013, 6.69318),
            (13.0354, 5.37216), (11.9004, 3.61079), (11.8407, 4.49148),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2006_d": GraphicalCut(
        "CutForwPro_2006_d",
        (
            (30.8363, 57.9489), (33.4314, 44.5966), (37.0188, 33.4697),
            (39.385, 27.6837), (42.2091, 23.678), (44.8042, 17.892),
            (48.2389, 12.9962), (51.2157, 11.661), (54.0398, 7.6553),
            (49.8418, 6.76515), (46.3308, 8.54545), (43.4303, 11.661),
            (40.2246, 15.2216), (37.5531, 19.6723), (34.6527, 27.6837),
            (32.6681, 33.0246), (31.5232, 38.3655), (30.302, 32.5795),
            (28.0122, 24.5682), (24.6538, 15.6667), (21.7533, 10.7708),
            (18.0133, 7.21023), (14.9602, 5.875), (13.7389, 6.32007),
            (13.5863, 11.2159), (18.2423, 15.6667), (22.9746, 24.1231),
            (26.8673, 33.4697), (28.7754, 45.0417), (30.073, 55.2784),
            (30.6836, 58.839), (30.9889, 56.6136), (30.8363, 57.9489),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
}


def late_proton_forward_cuts() -> dict[str, GraphicalCut]:
    """Return the 2002-2006 forward proton cuts, keyed by data folder."""
    return dict(_CUTS)