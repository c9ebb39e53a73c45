# trazador

Building blocks for a simple ray tracer in pure Python, with no third-party
dependencies.

## What it contains

- **Geometry**
  - `trazador.direction.Direction`: free vectors with `+`, `-`, scalar `*`
    and `/`, `dot`, `cross`, `modulus`, `normalize`, `is_normalized`,
    `is_perpendicular` and `angle_to` (in degrees).
  - `trazador.point3d.Point3D`: points; subtracting two points gives a
    `Direction`, and `Point3D.along(origin, direction, distance)` walks
    from a point along a normalized direction.
  - `trazador.coordinate.Coordinate`: homogeneous coordinates
    `(x, y, z, is_point)`.
  - `trazador.matrix4x4.Matrix4x4`: 4x4 matrices with `det`, `adjugate`,
    `transpose` and `inverse` (which raises `ValueError` for a singular
    matrix).
  - `trazador.transforms`: `translate`, `scale`, `rotate_x`, `rotate_y`,
    `rotate_z` and `change_basis` for coordinates, plus the matrices behind
    them. Angles are in degrees. `trazador.angles` converts between
    radians and degrees.
- **Ray tracing**
  - `Ray` (`trazador.ray`), `Color` (`trazador.color`), `Pixel`
    (`trazador.pixel`) and `Intersection` (`trazador.intersection`, which is
    truthy when the ray hit).
  - `Camera` (`trazador.camera`): `generate_pixels()` lays a grid of
    pixels, given by their corners, over the projection plane.
  - Primitives `Sphere`, `Plane` and `Triangle`, all implementing
    `Primitive.intersect(ray)`.
  - `BoundingBox` and `BVHNode` (`trazador.bounding_box`): axis-aligned
    boxes that grow to include points or other boxes, with a slab test
    `intersects(ray, t_enter, t_exit)`.
- **Images**
  - `trazador.ppm_format.PPMFormat`: reads and writes plain-text `P3` PPM
    files carrying an HDR `#MAX=` header line. Pixels (`PixelRGB`) are held
    in the range `[0, max_value]`; `render()` returns the image as text.
    Problems reading a file raise `PPMError`.
  - `trazador.ppm_image.PPMImage`: a simpler P3 reader and writer with
    `describe()` and `to_ldr()`.
- **Tone mapping** (`trazador.tone_mapping`): `clamp`, `linear`,
  `linear_clamp`, `gamma`, `gamma_clamp`, `reinhard` and `reinhard_clamp`
  for whole `PPMFormat` images, each with a `*_pixel` form for a single
  `PixelRGB`. The image functions return a new image.

## Installation

```
pip install .
```

## Examples

Generate the pixels of a camera's projection plane:

```python
from trazador.camera import Camera
from trazador.direction import Direction
from trazador.point3d import Point3D

camera = Camera(Point3D(0, 0, -3.5), Direction(0, 1, 0),
                Direction(-1, 0, 0), Direction(0, 0, 3), (8, 8))
pixels = camera.generate_pixels()
print(len(pixels))  # 64
```

Intersect a ray with a sphere:

```python
from trazador.color import Color
from trazador.direction import Direction
from trazador.point3d import Point3D
from trazador.ray import Ray
from trazador.sphere import Sphere

sphere = Sphere(Point3D(0, 0, 5), 1.0, Color(1, 0, 0))
hit = sphere.intersect(Ray(Point3D(0, 0, 0), Direction(0, 0, 1)))
if hit:
    print(hit.distances)  # [4.0, 6.0]
```

Tone-map an HDR PPM file:

```python
from trazador import tone_mapping
from trazador.ppm_format import PPMFormat

image = PPMFormat.read("forest_path.ppm")
tone_mapping.reinhard(image).write("forest_path_reinhard.ppm")
```

## What it does not do

- It does not render a scene: nothing traces rays from the camera's pixels
  into a set of primitives, shades them and writes the result as an image.
  Pixels from `Camera.generate_pixels()` all carry the default white colour.
- It has no conversion between RGB, HSL and HSV colour spaces.
- `BVHNode` only holds a box, a list of items and two children; there is no
  code that builds or traverses a hierarchy.
- There is no command-line program; everything is used as a library.

## Running the tests

```
pip install .[test]
pytest
```