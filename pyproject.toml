[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ascii-view"
version = "0.1.0"
description = "Render images as coloured ASCII art in the terminal, with optional edge detection"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["ascii", "ascii-art", "terminal", "image", "sobel", "ansi"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ascii-view = "ascii_view.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ascii_view"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
