"""Central-detector deuteron cuts: polynomial boundaries in energy / dE/dx."""

from __future__ import annotations

from .shapes import PolynomialCut

_CUBIC = "[0]*pow(x,3)+[1]*pow(x,2)+[2]*x+[3]"
_QUINTIC = "[0]*pow(x,5)+[1]*pow(x,4)+[2]*pow(x,3)+[3]*pow(x,2)+[4]*x+[5]"

_CUTS: dict[str, PolynomialCut] = {
    "1999_d1": PolynomialCut(
        "f_1999_d1", (-184.90, 246.20, -107.40, 19.54), 0.03, 0.68, _CUBIC
    ),
    "1999_d2": PolynomialCut(
        "f_1999_d2", (-38.39, 87.86, -63.33, 17.07), 0.04, 1.18, _CUBIC
    ),
    "2001_d": PolynomialCut(
        "f_2001_d", (-896.75, 722.28, -198.63, 24.42), 0.05, 0.37, _CUBIC
    ),
    "2002_d1": PolynomialCut(
        "f_2002_d1", (-102.8, 165.69, -85.52, 18.54), 0.04, 0.86, _CUBIC
    ),
    "2002_d2": PolynomialCut(
        "f_2002_d2", (-95.090, 168.53, -93.79, 19.57), 0.06, 0.92, _CUBIC
    ),
    "2002_d3": PolynomialCut(
        "f_2002_d3",
        (-570.89, 1567.5, -1613.94, 774.68, -181.4, 22.3),
        0.0, 0.8, _QUINTIC,
    ),
    "2005_d1": PolynomialCut(
        "f_2005_d1", (-370.49, 396.65, -138.60, 21.13), 0.01, 1.77, _CUBIC
    ),
    "2005_d2": PolynomialCut(
        "f_2005_d2", (-106.88, 176.22, -92.88, 19.15), 0.01, 1.77, _CUBIC
    ),
    "2006_d": PolynomialCut(
        "f_2006_d",
        (-372.71, 1034.69, -1114.18, 575.45, -148.26, 20.31),
        0.0, 0.8, _QUINTIC,
    ),
}


def deuteron_central_folders() -> tuple[str, ...]:
    """Data folders that have a central deuteron cut."""
    return tuple(_CUTS)


def deuteron_central_cut(folder: str) -> PolynomialCut:
    """Return the central deuteron cut curve for a data folder."""
    try:
        return _CUTS[folder]
    except KeyError:
        raise KeyError(f"no central deuteron cut for folder {folder!r}") from None