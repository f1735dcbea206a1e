[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hovercat"
version = "1.0.0"
description = "A side-scrolling arcade game: keep the cat hovering between the pipes."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "side-scroller", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hovercat = "hovercat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hovercat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
