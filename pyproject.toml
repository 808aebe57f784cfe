[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stterm"
version = "0.9.2"
description = "Terminal front-end logic: key and mouse encoding, palettes, box-drawing data, resources and options"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "terminal-emulator", "vt100", "xterm", "keyboard", "mouse", "x-resources"]
classifiers = [
    "Development Status :: 4 - Beta",
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
stterm = "stterm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
