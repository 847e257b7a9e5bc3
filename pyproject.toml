[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spincube"
version = "0.1.0"
description = "A shaded, rotating 3D cube rendered in the terminal with ANSI escape codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "ansi", "3d", "cube", "animation", "ascii-art"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spincube = "spincube.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spincube"]

[tool.pytest.ini_options]
addopts = "-ra"
