import pytest

from graalcuts.pion_central_early import early_pion_central_cuts

FOLDERS = (
    "1998_uv", "1999_d1", "1999_d2", "1999_uv", "1999_vis", "2000_fuv",
    "2000_uv1", "2000_uv2", "2000_vis", "2001_d", "2001_uv",
)


def test_folders_match_source():
    assert set(early_pion_central_cuts()) == set(FOLDERS)


@pytest.mark.parametrize("folder", FOLDERS)
def test_names_carry_folder(folder):
    cut = early_pion_central_cuts()[folder]
    assert cut.name == "CUTCentrPion_" + folder


@pytest.mark.parametrize("folder", FOLDERS)
def test_polygons_are_closed(folder):
    cut = early_pion_central_cuts()[folder]
    assert cut.points[0] == cut.points[-1]


@pytest.mark.parametrize("folder", FOLDERS)
def test_axis_variables(folder):
    cut = early_pion_central_cuts()[folder]
    assert (cut.var_x, cut.var_y) == ("Eclusc_track", "Dedx_track")


@pytest.mark.parametrize("folder", FOLDERS)
def test_far_point_is_outside(folder):
    cut = early_pion_central_cuts()[folder]
    assert not cut.is_inside(100.0, 100.0)
    assert not cut.is_inside(-100.0, -100.0)


def test_titles():
    cuts = early_pion_central_cuts()
    assert cuts["1999_vis"].title == "Graph"
    assert all(cuts[f].title == "" for f in FOLDERS if f != "1999_vis")


def test_known_vertices():
    cuts = early_pion_central_cuts()
    assert cuts["1998_uv"].points[0] == (0.0133238, 7.96007)
    assert cuts["2001_uv"].points[18] == (-0.0124642, 8.04687)
    assert cuts["2000_vis"].points[2] == (0.0656943, 3.99926)


def test_inside_pion_band():
    cut = early_pion_central_cuts()["1999_d1"]
    assert cut.is_inside(0.02, 4.0)


def test_returned_mapping_is_a_copy():
    cuts = early_pion_central_cuts()
    cuts.pop("1998_uv")
    assert "1998_uv" in early_pion_central_cuts()