[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atuin"
version = "0.1.0"
description = "Terminal UI building blocks and shell-history helpers: styles, layout, cell buffers, line cursor, durations and command statistics"
requires-python = ">=3.10"
keywords = ["terminal", "tui", "shell", "history", "buffer", "layout", "cursor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]
dependencies = [
    "wcwidth",
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["atuin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
