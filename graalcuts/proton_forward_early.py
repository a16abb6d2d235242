"""Forward-detector proton cuts for the 1998 to 2001 data folders."""

from __future__ import annotations

from .shapes import GraphicalCut

_CUTS: dict[str, GraphicalCut] = {
    "1998_uv": GraphicalCut(
        "Cut_ForwPro_1998_uv",
        (
            (28.8739, 1120.38), (27.5022, 1094.24), (26.1305, 854.659),
            (24.5531, 723.977), (23.1814, 632.5), (21.604, 536.667),
            (19.4093, 449.545), (17.0088, 327.576), (14.8827, 284.015),
            (14.8827, 284.015), (12.3451, 218.674), (11.7965, 205.606),
            (12.0708, 109.773), (14.1969, 153.333), (16.9403, 196.894),
            (21.1239, 340.644), (24.2102, 453.902), (26.1991, 571.515),
            (27.9823, 689.129), (28.7367, 784.962), (29.354, 845.947),
            (31.823, 658.636), (34.5664, 519.242), (37.3783, 388.561),
            (40.0531, 288.371), (42.865, 218.674), (45.3341, 170.758),
            (48.6261, 162.045), (52.0553, 157.689), (47.1858, 253.523),
            (43.9624, 345.0), (41.3562, 436.477), (39.3673, 501.818),
            (37.2412, 602.008), (35.458, 723.977), (33.0575, 867.727),
            (31.2058, 985.341), (30.2456, 1063.75), (29.5597, 1107.31),
            (28.9425, 1129.09), (28.8739, 1120.38),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "1999_d1": GraphicalCut(
        "CutForwPro_1999_d1",
        (
            (29.5487, 68.0511), (31.2909, 58.1648), (34.1482, 46.2187),
            (38.1903, 32.625), (40.3507, 26.446), (45.6471, 16.9716),
            (49.2013, 12.4403), (46.2743, 10.7926), (42.302, 14.5),
            (39.7931, 18.2074), (37.8418, 21.0909), (35.4027, 28.0937),
            (32.9635, 35.9205), (31.5697, 41.6875), (30.594, 44.571),
            (29.6881, 49.5142), (28.7821, 44.571), (26.7611, 35.0966),
            (24.1825, 26.0341), (22.1615, 21.9148), (20.0708, 15.7358),
            (15.8894, 9.96875), (13.7987, 7.90909), (12.5442, 7.90909),
            (12.4746, 11.6165), (15.8894, 18.6193), (20.0708, 26.446),
            (23.2765, 35.9205), (26.4126, 49.9261), (28.5033, 59.4006),
            (29.5487, 66.8153), (29.5487, 68.0511),
        ),
        "TOF(ns)", "dE/dx(MeV)", "Graph",
    ),
    "1999_d2": GraphicalCut(
        "CutForwPro_1999_d2",
        (
            (12.3352, 12.8523), (16.1681, 18.2074), (19.4436, 23.5625),
            (23.2765, 35.5085), (26.6217, 50.3381), (28.7821, 66.4034),
            (30.2456, 63.9318), (32.5454, 50.3381), (36.1692, 40.4517),
            (41.1869, 27.2699), (47.5288, 18.6193), (51.7102, 12.4403),
            (56.5188, 5.02557), (48.7135, 5.4375), (43.6958, 9.55682),
            (38.8872, 17.3835), (34.8451, 27.6818), (32.3363, 36.7443),
            (29.8274, 45.8068), (29.2699, 48.6903), (27.8761, 39.6278),
            (24.9491, 26.446), (20.0708, 14.5), (15.0531, 8.32102),
            (11.9867, 5.84943), (11.708, 10.7926), (13.2412, 14.9119),
            (17.6316, 20.679), (12.3352, 12.8523),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "1999_uv": GraphicalCut(
        "CutForwPro_1999_uv",
        (
            (13.8053, 111.562), (12.3009, 157.443), (13.7168, 212.983),
            (17.7876, 324.062), (21.1504, 401.335), (22.7434, 493.097),
            (24.6018, 563.125), (26.6372, 674.205), (27.6106, 785.284),
            (27.8761, 826.335), (27.9646, 903.608), (28.1416, 947.074),
            (29.3805, 949.489), (31.2389, 901.193), (32.6549, 799.773),
            (33.3628, 717.67), (35.5752, 609.006), (36.2832, 546.222),
            (38.5841, 476.193), (40.7965, 408.58), (44.9558, 309.574),
            (47.4336, 244.375), (50.177, 200.909), (50.4425, 147.784),
            (47.9646, 138.125), (43.9823, 212.983), (41.7699, 283.011),
            (38.8496, 372.358), (35.3982, 459.29), (33.2743, 575.199),
            (32.1239, 664.545), (30.531, 732.159), (30.0885, 647.642),
            (28.5841, 529.318), (26.8142, 452.045), (25.0442, 382.017),
            (22.4779, 311.989), (20.4425, 251.619), (17.7876, 191.25),
            (16.2832, 167.102), (14.7788, 128.466), (13.6283, 104.318),
            (13.8053, 111.562),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "1999_vis": GraphicalCut(
        "CutForwPro_1999_vis",
        (
            (12.5044, 100.483), (16.5664, 169.517), (19.5, 227.045),
            (21.6814, 296.08), (25.6681, 449.489), (27.6239, 568.381),
            (29.2788, 691.108), (30.1062, 748.636), (31.4602, 641.25),
            (35.0708, 495.511), (37.5531, 376.619), (41.0885, 265.398),
            (45.3009, 184.858), (48.385, 127.33), (52.5221, 161.847),
            (47.5575, 246.222), (44.3982, 345.937), (40.6372, 430.312),
            (37.177, 583.722), (35.2965, 664.261), (33.115, 771.648),
            (31.7611, 894.375), (30.1814, 994.091), (28.8274, 997.926),
            (27.323, 863.693), (26.1195, 714.119), (24.3894, 599.062),
            (22.0575, 476.335), (19.1239, 365.114), (16.792, 292.244),
            (14.0088, 207.869), (13.031, 188.693), (11.9027, 169.517),
            (12.5044, 100.483),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2000_fuv": GraphicalCut(
        "CutForwPro_2000_fuv",
        (
            (29.1892, 64.1364), (27.8805, 56.6695), (26.3202, 47.6307),
            (25.3136, 41.3428), (23.854, 37.8059), (21.6897, 30.732),
            (18.7201, 23.2652), (17.1598, 21.3002), (15.3982, 18.1562),
            (13.9386, 16.1913), (12.932, 13.4403), (12.932, 5.58049),
            (15.2472, 8.72443), (17.4115, 13.8333), (21.2367, 18.5492),
            (22.948, 23.6581), (25.4143, 31.125), (26.5719, 34.2689),
            (27.7799, 40.1638), (29.0382, 49.2027), (31.4541, 39.7708),
            (33.6184, 33.483), (35.3296, 26.4091), (37.4436, 21.6932),
            (38.9535, 17.7633), (40.9165, 14.2263), (42.4768, 12.2614),
            (43.8861, 12.2614), (45.094, 11.8684), (45.547, 18.5492),
            (43.1311, 20.1212), (40.6648, 26.0161), (37.9972, 30.732),
            (36.286, 36.6269), (34.4237, 45.6657), (32.5614, 50.3816),
            (31.5044, 56.2765), (30.3971, 60.5994), (29.5415, 63.7434),
            (29.1892, 64.1364),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2000_uv1": GraphicalCut(
        "CutForwPro_2000_uv1",
        (
            (29.0044, 68.4773), (30.8628, 60.2008), (32.6549, 51.9242),
            (35.4425, 43.2121), (37.7655, 35.8068), (39.6903, 29.7083),
            (42.2788, 24.0455), (44.6681, 19.6894), (47.1239, 18.3826),
            (50.1106, 15.3333), (51.9027, 10.9773), (49.7788, 6.1856),
            (46.2611, 6.62121), (43.2743, 7.92803), (39.4248, 16.6402),
            (35.7743, 25.3523), (33.0531, 33.1932), (31.0619, 42.3409),
            (28.8717, 49.3106), (27.4779, 37.9848), (24.9558, 29.7083),
            (22.8982, 24.0455), (20.0442, 18.8182), (18.7168, 15.3333),
            (15.7965, 10.1061), (13.7389, 7.49242), (12.6106, 6.1856),
            (11.7478, 11.4129), (15.1327, 16.6402), (17.9204, 22.303),
            (20.2434, 27.0947), (23.031, 36.2424), (24.9558, 43.6477),
            (26.0841, 51.9242), (27.0133, 59.7652), (28.208, 65.8636),
            (28.8717, 67.1705), (29.0044, 68.4773),
        ),
        "ddxtof_fow_2000_uv1", "", "Graph",
    ),
    "2000_uv2": GraphicalCut(
        "CutForwPro_2000_uv2",
        (
            (29.6969, 65.7623), (31.6173, 56.0914), (33.7434, 44.8935),
            (36.8296, 35.7315), (39.7102, 29.1146), (43.0022, 23.0066),
            (45.5398, 20.9706), (48.969, 13.8447), (45.2655, 12.3177),
            (41.6991, 12.3177), (38.8186, 19.4437), (35.3894, 26.0606),
            (33.6748, 33.6955), (31.9602, 37.2585), (29.9712, 44.8935),
            (29.2168, 48.9654), (27.365, 41.3305), (25.2389, 31.6596),
            (23.7301, 24.5336), (20.2323, 16.3897), (16.2544, 10.2817),
            (13.7168, 7.73674), (12.9624, 12.3177), (18.1748, 21.4796),
            (22.0155, 33.1866), (25.5133, 45.4025), (27.2279, 56.0914),
            (28.5996, 62.1993), (29.6969, 65.7623),
        ),
        "TOF(ns)", "DE/dx(MeV)", "Graph",
    ),
    "2000_vis": GraphicalCut(
        "CutForwPro_2000_vis",
        (
            (13.0088, 7.13352), (12.677, 11.5369), (15.1327, 16.3807),
            (18.5841, 21.6648), (21.7699, 29.1506), (24.0929, 38.3977),
            (26.0177, 46.3239), (26.9469, 57.7727), (27.8761, 63.9375),
            (28.7389, 69.2216), (30.7301, 58.6534), (33.1195, 48.0852),
            (36.4381, 38.3977), (39.292, 30.0312), (43.2743, 22.9858),
            (47.5885, 19.0227), (49.7788, 11.0966), (45.9956, 10.2159),
            (42.2124, 12.4176), (39.2257, 17.7017), (36.3053, 25.1875),
            (32.6549, 34.4347), (30.1991, 45.0028), (29.3363, 48.9659),
            (27.2788, 37.9574), (25.8186, 27.8295), (22.8982, 20.3437),
            (20.6416, 15.5), (17.1903, 11.0966), (15.7301, 9.33523),
            (13.0752, 5.8125), (13.0088, 7.13352),
        ),
        "ddxtof_fow_2000_vis", "", "Graph",
    ),
    "2001_d": GraphicalCut(
        "CutForwPro_2001_d",
        (
            (29.3208, 66.5), (28.3584, 65.3068), (27.2035, 54.1705),
            (25.9204, 43.8295), (24.0597, 36.6705), (21.365, 30.3068),
            (18.6704, 22.75), (15.2699, 18.375), (13.8584, 16.7841),
            (12.3827, 12.8068), (12.4469, 7.23864), (14.5, 9.22727),
            (17.6438, 13.6023), (21.0442, 19.1705), (24.6372, 28.7159),
            (26.8827, 35.0795), (27.7168, 39.0568), (28.2942, 44.2273),
            (29.1283, 48.6023), (30.0907, 44.625), (32.2721, 33.8864),
            (34.5177, 28.3182), (37.0841, 23.5455), (39.9071, 17.5795),
            (43.5642, 12.8068), (44.9757, 11.2159), (49.2102, 8.03409),
            (50.4934, 9.625), (44.9757, 19.1705), (40.7412, 25.1364),
            (37.469, 31.8977), (34.0044, 41.8409), (32.1438, 49.7955),
            (29.9624, 61.3295), (29.2566, 66.1023), (29.2566, 65.7045),
            (29.3208, 66.5),
        ),
        "ddxtof_fow_2001_d", "", "Graph",
    ),
    "2001_uv": GraphicalCut(
        "CutForwPro_2001_uv",
        (
            (11.4989, 6.41193), (11.4292, 12.4773), (14.2865, 17.0985),
            (16.865, 22.5862), (20.0011, 27.4962), (22.2312, 33.2727),
            (25.0885, 43.0928), (26.552, 52.6241), (27.7367, 60.4223),
            (28.1549, 68.2206), (29.1305, 68.5095), (30.594, 60.4223),
            (32.5454, 54.0682), (34.2179, 45.4034), (35.9602, 39.0492),
            (38.8872, 30.0956), (42.2323, 23.4527), (44.323, 19.4091),
            (46.9712, 16.5208), (49.4104, 13.0549), (52.9646, 11.0331),
            (54.0796, 7.85606), (48.2257, 8.72254), (44.7412, 11.0331),
            (41.1869, 15.6544), (37.5631, 23.1638), (33.2423, 32.1174),
            (30.7334, 43.0928), (29.2699, 47.4252), (27.0398, 34.7169),
            (22.51, 23.4527), (19.7223, 16.5208), (16.9347, 12.4773),
            (14.4259, 9.30019), (11.5686, 6.41193), (11.4989, 6.41193),
        ),
        "ddxtof_fow_2001_uv", "", "Graph",
    ),
}


def early_proton_forward_cuts() -> dict[str, GraphicalCut]:
    """Return the 1998-2001 forward proton cuts, keyed by data folder."""
    return dict(_CUTS)