[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pharmacy"
version = "0.1.0"
description = "A small console pharmacy stock and point-of-sale manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["pharmacy", "inventory", "point-of-sale", "stock", "console"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pharmacy = "pharmacy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pharmacy"]

[tool.pytest.ini_options]
addopts = "-ra"
