[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadart"
version = "0.1.0"
description = "Turn images into quadtree art and shape mosaics"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["quadtree", "mosaic", "image", "art", "tiling", "hexagon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Artistic Software",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quadart-quadtree = "quadart.quadtree_cli:main"
quadart-mosaic = "quadart.mosaic_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quadart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
