import pytest

from graalcuts.proton_forward_late import late_proton_forward_cuts

EXPECTED_COUNTS = {
    "2002_d1": 33,
    "2002_d2": 30,
    "2002_d3": 37,
    "2002_uv1": 41,
    "2002_uv2": 40,
    "2002_vis1": 40,
    "2002_vis2": 34,
    "2003_vis": 41,
    "2005_d1": 19,
    "2005_d2": 36,
    "2006_d": 33,
}


def test_folders_match_source():
    assert set(late_proton_forward_cuts()) == set(EXPECTED_COUNTS)


@pytest.mark.parametrize("folder,count", sorted(EXPECTED_COUNTS.items()))
def test_point_counts(folder, count):
    assert len(late_proton_forward_cuts()[folder].points) == count


@pytest.mark.parametrize("folder", sorted(EXPECTED_COUNTS))
def test_polygons_are_closed(folder):
    points = late_proton_forward_cuts()[folder].points
    assert points[0] == points[-1]


def test_names_and_axes_from_source():
    cuts = late_proton_forward_cuts()
    assert cuts["2002_vis2"].name == "CUTG"
    assert cuts["2002_d1"].name == "CutForwPro_2002_d1"
    assert cuts["2002_d1"].var_x == "ddxtof_fow_2002_d1"
    assert cuts["2006_d"].var_x == "TOF(ns)"
    assert cuts["2006_d"].var_y == "DE/dx(MeV)"


def test_first_point_of_2006_d():
    assert late_proton_forward_cuts()["2006_d"].points[0] == (30.8363, 57.9489)


@pytest.mark.parametrize("folder", sorted(EXPECTED_COUNTS))
def test_far_points_are_outside(folder):
    cut = late_proton_forward_cuts()[folder]
    assert cut.is_inside(0.0, 0.0) is False
    assert cut.is_inside(100.0, 500.0) is False


def test_point_inside_2005_d1_band():
    assert late_proton_forward_cuts()["2005_d1"].is_inside(16.0, 50.0) is True


def test_returned_mapping_is_a_copy():
    first = late_proton_forward_cuts()
    first.pop("2006_d")
    assert "2006_d" in late_proton_forward_cuts()