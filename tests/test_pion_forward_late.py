import pytest

from graalcuts.pion_forward_late import late_pion_forward_cuts

EXPECTED_FOLDERS = [
    "2002_d1", "2002_d2", "2002_d3", "2002_uv1",
    "2002_uv2", "2002_vis1", "2002_vis2",
]


def test_folders_in_order():
    assert list(late_pion_forward_cuts()) == EXPECTED_FOLDERS


@pytest.mark.parametrize("folder", EXPECTED_FOLDERS)
def test_polygons_are_closed(folder):
    cut = late_pion_forward_cuts()[folder]
    assert cut.points[0] == cut.points[-1]
    assert len(cut.points) >= 4


@pytest.mark.parametrize("folder", EXPECTED_FOLDERS)
def test_far_points_outside(folder):
    cut = late_pion_forward_cuts()[folder]
    assert cut.is_inside(0.0, 0.0) is False
    assert cut.is_inside(50.0, 100.0) is False


def test_point_inside_2002_d1():
    cut = late_pion_forward_cuts()["2002_d1"]
    assert cut.is_inside(10.0, 8.0) is True


def test_names_and_axes():
    cuts = late_pion_forward_cuts()
    assert cuts["2002_vis1"].name == "CUTForwPion2002_vis1"
    assert cuts["2002_vis2"].var_x == "tof_trf"
    assert cuts["2002_d1"].var_y == "De_trf"


def test_returned_mapping_is_a_copy():
    cuts = late_pion_forward_cuts()
    cuts.pop("2002_d1")
    assert "2002_d1" in late_pion_forward_cuts()


def test_negative_vertex_kept_for_2002_uv2():
    cut = late_pion_forward_cuts()["2002_uv2"]
    assert (10.1558, -1.75532) in cut.points