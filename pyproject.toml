[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "courtbook"
version = "0.1.0"
description = "Interactive terminal reservation system for three courts over a two-week calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["reservation", "booking", "courts", "scheduling", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
courtbook = "courtbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["courtbook"]

[tool.pytest.ini_options]
addopts = "-ra"
