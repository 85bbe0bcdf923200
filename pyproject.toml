[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oilpool"
version = "0.1.0"
description = "Input state, board geometry and shape tessellation for a small tic-tac-toe game"
requires-python = ">=3.11"
dependencies = []
keywords = ["game", "tic-tac-toe", "input", "geometry", "tessellation", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oilpool"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
