[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pawnstorm"
version = "0.1.0"
description = "A two-player chess game on one screen, played with the mouse"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["chess", "game", "board game", "pygame", "hot-seat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
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
test = [
    "pytest",
]

[project.scripts]
pawnstorm = "pawnstorm.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pawnstorm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
