[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelframe"
version = "0.1.0"
description = "Pure-Python RGBA images, instances, depth-sorted render queue, vertex batching, XPM42 and PNG textures, and window state."
requires-python = ">=3.10"
keywords = ["graphics", "image", "pixels", "xpm", "png", "render queue", "rgba"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pixelframe"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
