# animray

Small building blocks for writing a ray tracer in Python. The package needs
nothing beyond the standard library.

## What is in the box

- `animray.matrix.Matrix`: a mutable 4×4 matrix, the identity by default or
  built from 16 row-major values. It has `row`, `column`, `values`,
  `m[r, c]` indexing and assignment, equality, and multiplication with `*` or
  `@` by another matrix or by a 4-component vector.
- `animray.rgb`: the frozen `RGB` and `RGBA` colour types. `RGB` has
  `RGB.gray`, addition of colours or of a number to every channel,
  multiplication and division by a number. `register_conversion` and
  `convert_to` move a colour between colour spaces; `convert_to` raises
  `TypeError` when no conversion is registered.
- `animray.hsl.HSL`: hue (degrees), saturation and lightness, with `to_rgb`.
  Importing the module registers the HSL → RGB conversion.
- `animray.yuv.YUV`: YUV colours with `YUV.gray` and an unclamped `to_rgb`
  using the BT.709 coefficients. Importing the module registers the
  YUV → RGB conversion.
- `animray.luma.Luma`: an 8-bit gray level. It is clamped to 0–255 when built
  and adding two of them saturates at 255.
- `animray.srgb`: `apply_srgb_channel_gamma`, `anti_srgb_channel_gamma` and
  `to_srgb`, which turns linear `RGB` light levels within an exposure limit
  into 8-bit sRGB values.
- `animray.shader`: `dot`, the Lambertian `surface_interaction`, and
  `shader`. These scale the incident light by the dot product of the light
  ray's direction and the intersection's direction.
- `animray.light`: `AmbientLight`, which returns its colour, and
  `LightCollection`, which sums the lights it holds, starting from `zero`.
  Add lights to it with `push_back`.
- `animray.animation`:
  - `Animatable` keeps a fixed value.
  - `Animate` calls a function with a ray's `frame`, or with a frame given to
    `at_frame`.
  - `RotateXY` is a point that circles a centre in the x/y plane.
- `animray.movable`: `Transformable` keeps the forward and backward matrices.
  `Movable` wraps a scene object and carries rays between world and local
  co-ordinates for `intersects`, `occludes` and camera calls.
- `animray.sampling`:
  - `thread_engine` gives each thread its own seeded `random.Random`.
  - `Jitter` draws samples from a distribution using that engine.
- `animray.subpanel`:
  - `SubPanelProgress` works out a panel layout and counts the panels that
    are finished.
  - `sub_panel` renders a frame panel by panel on a thread pool and returns
    pixels indexed `[x][y]`.
  - `gcd` and `biggest_odd` are the helpers behind the layout.
- `animray.numeric.Number`: a number tagged by its subclass. Arithmetic
  between two different subclasses raises `TypeError`.
- `animray.functional`: `foldl`, `zip_pairs`, `is_callable` and
  `reduce_value`.

## Installing

```
pip install .
```

## Examples

Convert an HSL colour to RGB:

```python
from animray.hsl import HSL
from animray.rgb import RGB, convert_to

orange = convert_to(RGB, HSL(49.5, 0.893, 0.497))
print(orange.array)   # roughly (0.941, 0.785, 0.053)
```

Compose transformations:

```python
from animray.matrix import Matrix

m = Matrix()
assert m @ m == m   # the identity times itself is the identity
```

Render a small frame in panels across two threads:

```python
from animray.subpanel import SubPanelProgress, sub_panel

progress = SubPanelProgress(40, 30)
pixels = sub_panel(progress, 2, 40, 30, lambda x, y: x + y)
assert pixels[3][4] == 7
assert progress.count == progress.count_limit
```

## What it does not do

The package has no geometry (spheres, planes, triangles), no rays or cameras,
and no scene type. It does not write image files, and it has no command-line
program. `Movable`, the shader and the lights work with whatever ray,
intersection and scene objects the caller provides. Those objects must have a
`direction` for shading, be multipliable by a `Matrix` for `Movable`, and
offer `intersects` and `occludes` where they are needed.

## Running the tests

```
pip install .[test]
pytest
```