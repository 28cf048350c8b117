# ponca

Building blocks for the local analysis of point clouds, written with numpy.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

The package `ponca` has no top-level imports; import from its modules.

- `ponca.enums`: `FitResult`, the state a fit ends in (`STABLE`, `UNSTABLE`,
  `UNDEFINED`, `NEED_OTHER_PASS`, `CONFLICT_ERROR_FOUND`, and `NBMAX`, the
  number of states), and `DiffType`, the flags `FIT_SCALE_DER`,
  `FIT_SPACE_DER` and their union `FIT_SCALE_SPACE_DER`.
- `ponca.limited_priority_queue`: `LimitedPriorityQueue`, a sorted container
  with a fixed capacity. `compare(a, b)` (default `<`) says whether `a` ranks
  above `b`. Once the queue is full, a value ranking below every value held is
  rejected by `push`, which returns `False`; otherwise the lowest item is
  dropped. `top`, `bottom` and `pop` raise `IndexError` on an empty queue;
  `reserve` changes the capacity.
- `ponca.weight_func`: `DistWeightFunc(kernel, t)`, a weight that depends on
  the distance `d` to a basis centre: `kernel.f(d / t)` within `t`, zero
  beyond. It gives the weight (`w`) and its first and second derivatives in
  space (`spacedw`, `spaced2w`), in scale (`scaledw`, `scaled2w`) and the
  cross derivative (`scale_spaced2w`). The kernel is any object with `f`, `df`
  and `ddf` methods; the scale `t` must be positive.
- `ponca.primitive`: `PrimitiveBase`, which keeps the state of a fit and
  decides in `finalize` whether it is usable, and `PrimitiveDer`, which also
  accumulates weight derivatives in scale and/or space according to a
  `DiffType`.
- `ponca.line`: `Line`, a parametrised line primitive (a `PrimitiveBase`)
  whose potential is the squared distance to the line, with orthogonal
  projection.
- `ponca.colormap`: `get_color`, a blue-white-red colour map turning a scalar,
  such as a curvature, into an RGB `Color`. A value of exactly zero is white.

## Examples

```python
from ponca.limited_priority_queue import LimitedPriorityQueue

queue = LimitedPriorityQueue(3, [5, 1, 9, 3])
list(queue)      # [1, 3, 5]
queue.push(0)    # True, 5 is dropped
queue.top()      # 0
queue.bottom()   # 3
```

```python
import numpy as np
from ponca.line import Line

line = Line(3)
line.set_line(np.zeros(3), np.array([1.0, 0.0, 0.0]))
line.potential(np.array([2.0, 3.0, 0.0]))  # 9.0
line.project(np.array([2.0, 3.0, 0.0]))    # array([2., 0., 0.])
```

```python
from ponca.colormap import get_color

get_color(0.25, -0.5, 0.5)  # Color(r=1.0, g=0.5, b=0.5)
```

## What it does not do

- It has no complete fitting procedures: there are no plane or sphere fits,
  and nothing here computes a line from samples; `Line` is set by hand with
  `set_line`.
- It ships no weight kernels; `DistWeightFunc` needs one supplied by the
  caller.
- It has no spatial index for neighbour searches, no file reading, no
  viewer and no command-line tool.