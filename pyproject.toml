[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "fdfview"
version = "0.1.0"
description = "Isometric wireframe viewer for FdF height-map files"
requires-python = ">=3.10"
keywords = ["fdf", "wireframe", "isometric", "height-map", "viewer", "bresenham"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fdfview = "fdfview.app:main"
fdfview-classic = "fdfview.classic:main"
fdfview-demo = "fdfview.demo:main"

[tool.setuptools.packages.find]
include = ["fdfview*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
