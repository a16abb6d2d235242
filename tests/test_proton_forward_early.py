import pytest

from graalcuts.proton_forward_early import early_proton_forward_cuts

FOLDERS = [
    "1998_uv", "1999_d1", "1999_d2", "1999_uv", "1999_vis", "2000_fuv",
    "2000_uv1", "2000_uv2", "2000_vis", "2001_d", "2001_uv",
]

POINT_COUNTS = {
    "1998_uv": 41, "1999_d1": 32, "1999_d2": 29, "1999_uv": 43,
    "1999_vis": 34, "2000_fuv": 40, "2000_uv1": 38, "2000_uv2": 29,
    "2000_vis": 32, "2001_d": 37, "2001_uv": 36,
}


def test_folders_are_the_early_ones():
    assert sorted(early_proton_forward_cuts()) == sorted(FOLDERS)


@pytest.mark.parametrize("folder", FOLDERS)
def test_point_counts_match_source(folder):
    cut = early_proton_forward_cuts()[folder]
    assert len(cut.points) == POINT_COUNTS[folder]


@pytest.mark.parametrize("folder", FOLDERS)
def test_polygons_are_closed(folder):
    cut = early_proton_forward_cuts()[folder]
    assert cut.points[0] == cut.points[-1]


@pytest.mark.parametrize("folder", FOLDERS)
def test_names_end_with_folder(folder):
    cut = early_proton_forward_cuts()[folder]
    assert cut.name.endswith(folder)


@pytest.mark.parametrize("folder", FOLDERS)
def test_far_points_are_outside(folder):
    cut = early_proton_forward_cuts()[folder]
    assert cut.is_inside(1000.0, 5000.0) is False
    assert cut.is_inside(0.0, 0.0) is False


def test_pinned_values_from_source():
    cuts = early_proton_forward_cuts()
    assert cuts["1998_uv"].name == "Cut_ForwPro_1998_uv"
    assert cuts["1999_d1"].var_y == "dE/dx(MeV)"
    assert cuts["2000_uv1"].var_x == "ddxtof_fow_2000_uv1"
    assert cuts["1999_uv"].points[12] == (29.3805, 949.489)


def test_returned_mapping_is_a_copy():
    first = early_proton_forward_cuts()
    first.pop("1998_uv")
    assert "1998_uv" in early_proton_forward_cuts()