import pytest

from graalcuts.deuteron_central import deuteron_central_cut, deuteron_central_folders

EXPECTED_FOLDERS = (
    "1999_d1", "1999_d2", "2001_d", "2002_d1", "2002_d2",
    "2002_d3", "2005_d1", "2005_d2", "2006_d",
)


def test_folders_listed_in_order():
    assert deuteron_central_folders() == EXPECTED_FOLDERS


def test_1999_d1_parameters_and_range():
    cut = deuteron_central_cut("1999_d1")
    assert cut.name == "f_1999_d1"
    assert cut.coefficients == (-184.90, 246.20, -107.40, 19.54)
    assert (cut.x_min, cut.x_max) == (0.03, 0.68)


@pytest.mark.parametrize("folder,degree", [("2002_d3", 5), ("2006_d", 5), ("2001_d", 3)])
def test_degrees(folder, degree):
    assert deuteron_central_cut(folder).degree == degree


@pytest.mark.parametrize("folder", EXPECTED_FOLDERS)
def test_value_at_zero_is_last_coefficient(folder):
    cut = deuteron_central_cut(folder)
    assert cut(0.0) == pytest.approx(cut.coefficients[-1])


@pytest.mark.parametrize("folder", EXPECTED_FOLDERS)
def test_range_endpoints_are_in_range(folder):
    cut = deuteron_central_cut(folder)
    assert cut.in_range(cut.x_min)
    assert cut.in_range(cut.x_max)
    assert not cut.in_range(cut.x_max + 1.0)


def test_2005_cuts_share_range():
    first = deuteron_central_cut("2005_d1")
    second = deuteron_central_cut("2005_d2")
    assert (first.x_min, first.x_max) == (second.x_min, second.x_max)
    assert first.coefficients != second.coefficients


def test_unknown_folder_raises():
    with pytest.raises(KeyError):
        deuteron_central_cut("2003_vis")