[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "demofw"
version = "0.1.0"
description = "Small demo framework: fast approximate math, easing, keyframe animation, pixel drawing, bitmap font layout and a ProTracker module player."
requires-python = ">=3.10"
dependencies = []
keywords = ["demoscene", "easing", "animation", "pixels", "bitmap-font", "protracker", "mod", "tracker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["demofw"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
