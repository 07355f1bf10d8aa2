[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zjmux"
version = "0.1.0"
description = "Terminal workspace building blocks: status and tab bars, a file browser, input dispatch and session lookup"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "multiplexer", "status-bar", "tab-bar", "sessions", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zjmux = "zjmux.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zjmux"]

[tool.pytest.ini_options]
addopts = "-ra"
