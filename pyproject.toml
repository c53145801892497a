[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilesnake"
version = "1.0.0"
description = "A classic tile-based Snake game with wrap-around edges, played with the arrow keys."
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "arcade", "tkinter"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tilesnake = "tilesnake.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tilesnake"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
