# graalcuts

Particle identification cuts for tagged-photon beam detector data,
organised by data-taking period (folder names such as `1999_d1`,
`2002_uv2` or `2006_d`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Shapes

`graalcuts.shapes` holds the two kinds of cut:

- `GraphicalCut` — a closed polygon drawn on a two-variable plot. It has a
  `name`, its `points` (a tuple of `(x, y)` pairs), and the labels `var_x`,
  `var_y` and `title`. `is_inside(x, y)` tells whether a point lies inside
  the polygon, by the even-odd rule.
- `PolynomialCut` — a polynomial curve with a `name`, `coefficients` from
  the highest power down, a range `x_min` to `x_max` and a descriptive
  `formula`. Calling it, `cut(x)`, evaluates the polynomial; `in_range(x)`
  tells whether `x` lies in the range; `degree` gives its degree. An empty
  coefficient list or `x_min > x_max` raises `ValueError`.

## Cut collections

Each of these functions returns a new dictionary of `GraphicalCut` objects
keyed by data folder:

| Function | Detector, particle | Periods |
| --- | --- | --- |
| `graalcuts.proton_forward_early.early_proton_forward_cuts()` | forward, proton | 1998 to 2001 |
| `graalcuts.proton_forward_late.late_proton_forward_cuts()` | forward, proton | 2002 to 2006 |
| `graalcuts.pion_forward_late.late_pion_forward_cuts()` | forward, pion | 2002 |
| `graalcuts.pion_central_early.early_pion_central_cuts()` | central, pion | 1998 to 2001 |
| `graalcuts.pion_central_late.late_pion_central_cuts()` | central, pion | 2002 to 2006 |

Forward cuts are drawn in time of flight (ns) against energy loss; central
cuts in cluster energy (`Eclusc_track`) against dE/dx (`Dedx_track`).

Central deuteron cuts are polynomial boundaries:
`graalcuts.deuteron_central.deuteron_central_folders()` lists the folders
that have one, and `deuteron_central_cut(folder)` returns its
`PolynomialCut`, raising `KeyError` for a folder without one.

```python
from graalcuts.proton_forward_late import late_proton_forward_cuts
from graalcuts.deuteron_central import deuteron_central_cut

cut = late_proton_forward_cuts()["2002_d1"]
print(cut.is_inside(30.0, 40.0))

curve = deuteron_central_cut("2002_d1")
if curve.in_range(0.3):
    print(curve(0.3))
```

## What the package does not do

The package holds the cuts and the shapes that apply them, and nothing
more. It does not read detector data files, select or reconstruct events,
fill histograms, write results, or offer a command to run. It has no
forward deuteron cuts, no forward pion cuts for the 1998 to 2001 periods,
and no single lookup across all collections; pick the collection for the
detector, particle and period you need.