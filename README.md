# sortvis

Watch three sorting algorithms work on random data side by side. `sortvis`
opens an 800×600 window and draws three horizontal strips of bars. The strips
show bubble sort, selection sort and merge sort. Each strip starts from its
own list of 799 random values, and each strip is 200 pixels high. The bars
touched by the latest swap are drawn in red and all the other bars in light
blue.

## Installing

```
pip install .
```

This also installs pygame, which draws the window.

## Running

```
sortvis
```

The command has no options apart from `--help`. Each frame advances every
sort by one step, with a 20 ms pause between frames:

- bubble sort makes one pass, and it redraws the window after every swap it makes;
- selection sort moves the smallest remaining value into place;
- merge sort finishes the whole list in its first step.

The window closes on its own once all three sorts are done, or sooner if you
close it. If pygame cannot open the display, the command prints an error and
exits with status 1.

## Using it as a library

The drawing code only needs an object with the methods `set_color`,
`fill_rect`, `clear` and `present`. You can therefore run the sorts without
opening a window. `sortvis.visual.Renderer` is such an object. It keeps every
frame it is given as a list of `Bar` records in its `frames` attribute.

```python
import random

from sortvis.app import build_cases
from sortvis.visual import Renderer

cases = build_cases(40, random.Random(1))   # 39 values per sort
renderer = Renderer()
while not cases.proceed(renderer):
    pass

for scase in cases:
    print(scase.area.data.name, scase.area.data.swaps, scase.nodes.values())
```

Bubble sort records one frame for every swap, so with the full 800-pixel
width the recorded frames grow large. Small widths suit headless runs better.

The building blocks:

- `sortvis.model`
  - `Nodes` is a doubly linked list with `head`, `tail` and `length`.
  - `Nodes.from_values(...)` builds a list from values.
  - `values()` returns the values in list order.
  - `max_value()` returns the largest value, or -1 for an empty list.
  - `random_nodes(length, rng)` builds a list of random values between 0 and 2³¹−1.
- `sortvis.area`
  - `new_area(name, length, width, height, left, top, nodes)` builds the screen area a case is drawn in.
  - `Area` is that screen area.
  - `Area.data` (`AreaData`) holds the case's `name`, its `swaps` and `shifts` counters, and the nodes of the latest swap.
- `sortvis.sorting`
  - `SortingCase` ties a list, its area and a step function together.
  - `SortingCases` collects cases.
  - `SortingCases.add(scase)` adds a case; `None` is ignored.
  - `SortingCases.proceed(renderer)` runs one step of every case and returns `True` once all of them report done.
- `sortvis.visual`
  - `area_bars(scase)` returns the bars an area would draw.
  - `render_area` draws one case.
  - `render_areas` clears the screen, draws every case and presents the frame.
- `sortvis.cases`
  - `sortvis.cases.bubble.create_bubble_case(length, width, height, left, top, rng)` builds a bubble sort case.
  - `sortvis.cases.selection.create_selection_case(...)` builds a selection sort case and takes the same arguments.
  - `sortvis.cases.merge.create_merge_case(...)` builds a merge sort case and takes the same arguments.
  - `bubble_pass`, `selection_step` and `merge_sort_nodes` are the single steps those cases use.
- `sortvis.app`
  - `build_cases(width, rng)` builds the three stacked cases that the window shows.
  - `PygameRenderer` draws onto a pygame surface.

Area scaling details are logged at debug level through the `logging` module.

## Limitations

The window size, the number of values and the set of algorithms are fixed in
the command. To change them, build your own cases through the library.

## Tests

```
pip install .[test]
pytest
```