import pytest

from graalcuts.pion_central_late import late_pion_central_cuts


EXPECTED_COUNTS = {
    "2002_d1": 18,
    "2002_d2": 18,
    "2002_d3": 19,
    "2002_uv1": 18,
    "2002_uv2": 18,
    "2002_vis1": 22,
    "2002_vis2": 18,
    "2003_vis": 19,
    "2005_d1": 19,
    "2005_d2": 23,
    "2006_d": 28,
}


def test_folders_present():
    assert set(late_pion_central_cuts()) == set(EXPECTED_COUNTS)


@pytest.mark.parametrize("folder,count", sorted(EXPECTED_COUNTS.items()))
def test_point_counts(folder, count):
    assert len(late_pion_central_cuts()[folder].points) == count


@pytest.mark.parametrize("folder", sorted(EXPECTED_COUNTS))
def test_polygons_are_closed(folder):
    cut = late_pion_central_cuts()[folder]
    assert cut.points[0] == cut.points[-1]


@pytest.mark.parametrize("folder", sorted(EXPECTED_COUNTS))
def test_axes(folder):
    cut = late_pion_central_cuts()[folder]
    assert (cut.var_x, cut.var_y) == ("Eclusc_track", "Dedx_track")


def test_names_kept_as_in_source():
    cuts = late_pion_central_cuts()
    assert cuts["2002_d2"].name == "CUTCentrPion_2002_uv1"
    assert cuts["2002_d3"].name == "CUTCentrPion_2003_d3"


def test_inside_and_outside_band():
    cut = late_pion_central_cuts()["2002_d1"]
    assert cut.is_inside(0.2, 2.5)
    assert not cut.is_inside(0.2, 6.0)
    assert not cut.is_inside(0.8, 2.0)


def test_returned_mapping_is_a_copy():
    first = late_pion_central_cuts()
    first.pop("2006_d")
    assert "2006_d" in late_pion_central_cuts()