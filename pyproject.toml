[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubtown"
version = "0.1.0"
description = "Game logic for a small grid-based first-person raycasting game: map, player, entities, controls, menus, minimap, fonts and HUD."
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "game", "first-person", "grid", "minimap", "hud"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubtown"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
