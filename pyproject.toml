[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trazador"
version = "0.1.0"
description = "Ray tracing building blocks: 3D geometry, primitives, a pinhole camera, PPM images and tone mapping."
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "geometry", "ppm", "tone mapping", "hdr"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trazador"]

[tool.pytest.ini_options]
addopts = "-ra"
