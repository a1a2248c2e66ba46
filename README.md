# fluentkit

Building blocks for Fluent-style user interfaces, using only the standard
library. The package holds the models, styles and algorithms a UI layer is
built on; it does not draw anything itself.

## Modules

- `fluentkit.theme`: `Theme` derives the primary, background, window, font
  and item colours from a `ColorSet` (its `dark` and `lighter` shades) and a
  `DarkMode` (`LIGHT`, `DARK` or `SYSTEM`). `Theme.dark` tells which palette
  is in effect. Callbacks registered with `Theme.subscribe` are called after
  `set_dark_mode` or `set_system_dark`; `subscribe` returns a function that
  removes the callback. `Color` is an RGBA value with channels in 0..255.
- `fluentkit.text_style`: `TextStyle` holds the type ramp (`caption`, `body`,
  `body_strong`, `subtitle`, `title`, `title_large`, `display`) as `Font`
  values with a pixel size and a `FontWeight`. `text_style()` returns one
  shared instance.
- `fluentkit.tree_model`: `TreeModel` and `Node` give a flat, row-based view
  of a tree built from nested mappings with `title`, `key` and `children`.
  It supports `expand`, `collapse`, `all_expand`, `all_collapse`,
  `check_row` (a branch checks every leaf below it; `selection` lists the
  checked leaves) and `drag_and_drop` of rows.
- `fluentkit.view_model`: `ViewModel` objects with the same name share their
  properties through a `ViewModelManager`, either per window or across the
  application (`Scope.WINDOW`, `Scope.APPLICATION`). Sharing starts at
  `complete()`; `set()` then pushes changes to the others, and `close()`
  (or leaving a `with` block) stops it.
- `fluentkit.watermark`: `Watermark` holds the settings of a tiled text
  watermark; `Watermark.positions` returns the centre of every copy of the
  text needed to cover an area, given the measured text size.
- `fluentkit.tools`: helpers for hashing (`md5`, `sha256`), base64
  (`to_base64`, lenient `from_base64`), file URLs (`to_local_path`,
  `file_name_from_url`, `url_from_file_path`), `read_file`, `remove_file`,
  `remove_dir`, `current_timestamp`, `new_uuid`, `application_dir_path`,
  platform checks (`is_win`, `is_linux`, `is_macos`), `html_to_plain_text`
  and `color_alpha`.
- `fluentkit.bitstream`: `BitStream`, a bit sequence that packs into bytes
  most significant bit first.
- `fluentkit.microqr_spec`: Micro QR tables (capacities, length indicators,
  format information) and `new_frame`, which lays out the function patterns
  of an empty symbol. `ECLevel` and `EncodeMode` name the levels and modes.
- `fluentkit.micro_mask` and `fluentkit.qr_mask`: the mask patterns, format
  information placement and scoring used to choose a mask for Micro QR and
  QR symbols (`select_mask`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

A theme that tracks dark mode:

```python
from fluentkit.theme import Color, ColorSet, DarkMode, Theme

accent = ColorSet(dark=Color(0, 102, 180), lighter=Color(76, 160, 224))
theme = Theme(accent, dark_mode=DarkMode.LIGHT)
theme.subscribe(lambda: print("dark:", theme.dark))
theme.set_dark_mode(DarkMode.DARK)   # prints "dark: True"
print(theme.primary_color)           # the lighter shade
```

A tree with collapsible, checkable rows:

```python
from fluentkit.tree_model import TreeModel

model = TreeModel()
model.set_data_source([
    {"title": "Root", "key": "1", "children": [
        {"title": "Child A", "key": "1-1"},
        {"title": "Child B", "key": "1-2"},
    ]},
])
model.collapse(0)
print(len(model))                          # 1
model.expand(0)
model.check_row(0, True)
print([node.title for node in model.selection])   # ['Child A', 'Child B']
```

Choosing a Micro QR mask:

```python
from fluentkit.microqr_spec import ECLevel, new_frame
from fluentkit.micro_mask import select_mask

frame = new_frame(2)
masked = select_mask(2, frame, ECLevel.L)
```

Hashing and encoding:

```python
from fluentkit.tools import md5, to_base64, from_base64

md5("hello")                      # '5d41402abc4b2a76b9719d911017c592'
from_base64(to_base64("héllo"))   # 'héllo'
```

## What it does not do

- Nothing is rendered: there are no widgets, windows or painting. Colours,
  fonts and watermark positions are values for a UI layer to use.
- There is no complete QR encoder. The package does not turn text into data
  codewords or compute error correction; it provides the bit stream, the
  Micro QR tables and frame, and mask application and selection only.
- There is no command-line program.