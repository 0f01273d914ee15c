[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flappygopher"
version = "0.1.0"
description = "A small side-scrolling arcade game: steer a gopher through gaps between pipes."
requires-python = ">=3.10"
keywords = ["game", "arcade", "flappy", "pygame", "side-scroller"]
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flappygopher = "flappygopher.app:main"

[tool.hatch.build.targets.wheel]
packages = ["flappygopher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
