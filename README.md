# bpdf

Building blocks for laying out PDF documents on a grid: property objects,
geometry helpers, timing and size metrics, and renderers that draw on a PDF
writer object you supply.

## Modules

- `bpdf.color`: `Color` (shown as `RGB(r, g, b)`), the constants
  `WHITE_COLOR`, `BLACK_COLOR`, `RED_COLOR`, `GREEN_COLOR` and `BLUE_COLOR`,
  `color_string`, the enums `LineStyle` and `Border`, and `CellStyle` with
  `to_map()`.
- `bpdf.geometry`: `Dimensions`, `Cell` and `Margins`, plus
  `new_root_cell`, `resize`, `center_correction` and `inner_center_cell`,
  which fit an element into a cell.
- `bpdf.shapes`: `Rect`, `Proportion`, `Barcode` (with `BarcodeType`) and
  `Line` (with `Orientation`). Each has `make_valid()`, which fills in
  defaults and clamps values, and `to_map()`, which returns the fields that
  are set.
- `bpdf.typography`: `Font`, `Text`, `Signature` and `PageNumber` (with
  `Place`), the enums `FontStyle`, `FontFamily`, `Align` and
  `BreakLineStrategy`, and `default_error_text()`.
- `bpdf.entity`: `Config`, `CustomFont`, `Image`, `Utf8Text`, `Metadata` and
  `Protection`, and the enums `Extension`, `ProtectionType`, `ProviderType`
  and `GenerationMode`. `Config.to_map()` flattens a configuration into one
  mapping.
- `bpdf.node`: a generic tree `Node` with `add_next`, `backtrack`, `filter`
  and `get_structure`.
- `bpdf.metrics`: `Time`, `Size`, `TimeMetric`, `SizeMetric` and `Report`.
  `normalize()` moves values to larger units (ns → μs → ms, b → Kb → Mb → Gb).
  `Report.save(file)` writes one metric per line.
- `bpdf.timing`: `get_time_spent(closure)` returns the time a call took, in
  nanoseconds.
- `bpdf.document`: `Structure`, and `Pdf`, which holds the generated bytes
  and an optional report and offers `base64()` and `save(file)`.
- `bpdf.metricsdecorator`: `MetricsDecorator` wraps a document builder.
  It times `get_structure`, `generate`, `register_header`, `register_footer`,
  `add_row`, `add_rows`, `add_auto_row` and `add_pages`. `generate()` returns
  a `Pdf` with a normalised `Report` that includes the file size.
- `bpdf.cache`: `ImageCache`, and `LockedCache`, which guards writes with a
  lock. A missing image raises `ImageNotFoundError`.
- `bpdf.render`: drawing on a PDF writer object.
  - `cellwriter`: the styler chain that `build_chain` assembles, in the order
    `BorderThicknessStyler` → `BorderLineStyler` → `BorderColorStyler` →
    `FillColorStyler` → `CellCreator`.
  - `font`: `FontState`.
  - `line`: `LineRenderer`.
  - `image`: `ImageRenderer` and `from_bytes`, and `ImageRegistrationError`.
  - `text`: `TextRenderer`, which breaks lines at spaces or with dashes and
    aligns left, right, centre or justified.
  - `provider`: `Provider`, which works from a `Dependencies` bundle.
    A component that cannot be drawn is replaced by an error message in red.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from bpdf.geometry import Dimensions, inner_center_cell, resize
from bpdf.metrics import Size, SizeMetric, SizeScale

fitted = resize(Dimensions(80, 100), Dimensions(100, 100), 75.0, False)
print(fitted.width, fitted.height)          # 60.0 75.0

cell = inner_center_cell(Dimensions(80, 80), Dimensions(100, 100))
print(cell.x, cell.y)                       # 10.0 10.0

metric = SizeMetric("file_size", Size(2000.0, SizeScale.BYTE))
metric.normalize()
print(metric)                               # file_size -> 2.00Kb
```

## What the package does not do

- It has no PDF writer of its own. The renderers and `Provider` call methods
  such as `set_font`, `cell_format`, `text`, `line`, `image`,
  `register_image` and `output` on a writer object that you pass in.
- It does not generate QR codes, data matrices or barcodes. `Provider`
  expects a code generator in `Dependencies` that provides `gen_qr`,
  `gen_data_matrix` and `gen_bar`.
- It has no row, column or page components and no document builder to put
  in a `MetricsDecorator`. You supply the inner builder.
- It does not merge PDF files.
- It has no command-line tool.