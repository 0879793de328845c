[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "connectfour"
version = "0.1.0"
description = "Play Connect Four in the terminal against a negamax engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["connect four", "game", "negamax", "alpha-beta", "bitboard", "terminal"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
connectfour = "connectfour.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["connectfour"]

[tool.pytest.ini_options]
addopts = "-ra"
