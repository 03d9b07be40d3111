[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycast2d"
version = "0.1.0"
description = "A small interactive top-down 2D ray caster with pixel images, an XPM reader and an event loop"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["raycasting", "graphics", "xpm", "2d", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raycast2d = "raycast2d.app:main"

[tool.hatch.build.targets.wheel]
packages = ["raycast2d"]

[tool.pytest.ini_options]
addopts = "-ra"
