# dropflow

`dropflow` holds pieces of a vision-based microfluidics automation
setup that do not depend on a camera, a pump or a GUI toolkit: a
one-dimensional persistence analysis for locating extrema in profiles,
a camera settings table that flattens to and from text, and the state
models behind the image view, the live data plot and the operator
dashboard. Everything works on plain Python data types and has no
third-party dependencies.

## Modules

| Module | What it does |
| --- | --- |
| `dropflow.persistence` | `Persistence1D` and `PairedExtrema`: find, pair and rank local minima and maxima of 1-D data |
| `dropflow.camera_settings` | `CameraSettings`: typed camera features that collapse to and expand from a flat map of strings |
| `dropflow.display` | `MouseTracker`: press, drag and release state of the image view |
| `dropflow.plot` | `Plot`: series, axis range and the screen layout of grid, curves and cursor |
| `dropflow.dashboard` | `Dashboard` and `Inlet`: inlet pressure requests and per-channel check boxes |

## Topological persistence

```python
from dropflow.persistence import Persistence1D

p = Persistence1D()
p.run([2.0, 0.5, 3.0, 1.0, 4.0, 0.0, 2.5])

pairs = p.get_paired_extrema(0.0, False)          # least to most persistent
minima, maxima = p.get_extrema_indices(1.0, False)
print(p.global_minimum_index(False), p.global_minimum_value())
print(p.format_results(0.0, False))
assert p.verify_results()
```

Each `PairedExtrema` holds `min_index`, `max_index` and `persistence`
(the data difference between them, never negative). Only pairs whose
persistence is at least the threshold are returned; a negative
threshold raises `ValueError`. With `matlab_indexing` true, indices are
one-based. The global minimum is never paired; before any data has been
analysed `global_minimum_index` gives -1 and `global_minimum_value` 0.

## Camera settings

```python
from dropflow.camera_settings import CameraSettings

s = CameraSettings()                 # defaults; s.flat is filled at once
s.flat["FrameRate"] = "20"
s.flat["SensorCooling"] = "0"
s.expand()                           # flat text back into the typed tables
print(s.floats["FrameRate"], s.bools["SensorCooling"])
print(s.describe())
```

`CameraSettings` keeps `bools`, `ints`, `floats` and `enums`
dictionaries. `collapse()` rebuilds `flat`, sorted by key, and returns
it; `expand()` reads known keys from `flat` back, ignoring unknown keys
and turning unparsable numbers into zero.

## Mouse tracking

```python
from dropflow.display import MouseTracker, LEFT_BUTTON

lines = []
m = MouseTracker(on_line=lines.append)   # reports (0, 0, 0, 0) at once
m.press(10, 10, LEFT_BUTTON)
m.move(30, 20, LEFT_BUTTON)
m.release(30, 20, LEFT_BUTTON)           # reports (10, 10, 30, 20)
print(m.take_left_press(), m.take_right_press())
```

`take_left_press` and `take_right_press` return the last press point
and reset it to `(0, 0)`. `left_press_movement` returns the drag made
with the left button held since its previous call.

## Plot layout

```python
from dropflow.plot import Plot, PenStyle

plot = Plot()
plot.add_data([0.0, 1.5, 3.0, 2.0])
plot.add_color("blue")
plot.add_pen_style(PenStyle.SOLID)
plot.set_cursor(2)
layout = plot.layout(800, 600)
print(layout.axis, layout.rect, layout.cursor)
```

`axis_range` pads the data range by one unit and rounds outward;
`layout` maps every series into the plot rectangle (a margin of 50
pixels), with ten labelled ticks on each axis by default. Both return
`None` when there is no data. An empty series, or a series without a
colour and pen style, raises `ValueError`.

## Dashboard

```python
from dropflow.dashboard import Dashboard

d = Dashboard(on_inlet_requests=print, on_auto_catch_requests=print)
d.reset_inlets([(0, 1, 0, 100), (0, 2, 1, 50)])  # (pump, transducer, order, limit)
d.set_inlet(1, 80)                               # clamped to 50, reported
d.reset_auto_catch(3)
d.set_auto_catch(2, True)
d.zero_inlets()
```

Inlet values are clamped to `0..limit`; every change reports all inlet
values through the callback. The auto-catch, use-neck and
neck-direction check boxes report their full state on every reset and
every change. Out-of-range indices raise `IndexError`.

## What this package does not do

It does not grab camera frames, drive pumps, detect droplets in images
or run a controller, and it has no window or command-line program. It
supplies the analysis and state pieces such a program would be built
from.

## Running the tests

Install the package together with its `test` extra and run pytest
from the project directory.