[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meteorite"
version = "0.1.0"
description = "Tiered in-memory cache with weighted eviction and access prediction, plus theming primitives for UI components"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "eviction", "tiered-cache", "markov", "theme", "css-variables"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meteorite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
