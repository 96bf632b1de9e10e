[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "negentropy"
version = "0.1.0"
description = "A small flowchart diagram editor with pan, zoom, draggable blocks and XML workspace files"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["diagram", "flowchart", "editor", "pygame", "xml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
negentropy = "negentropy.application:main"

[tool.hatch.build.targets.wheel]
packages = ["negentropy"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
