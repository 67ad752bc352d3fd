[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mybar"
version = "0.1.0"
description = "A status line generator for i3bar showing network throughput and the current time"
requires-python = ">=3.10"
dependencies = []
keywords = ["i3", "i3bar", "status", "statusbar", "network", "clock"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mybar = "mybar.bar:main"

[tool.hatch.build.targets.wheel]
packages = ["mybar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
