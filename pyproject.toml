[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udeastay"
version = "0.1.0"
description = "Console sign-in menus for a lodging marketplace, with models for dates, lodgings and reservations"
requires-python = ">=3.10"
dependencies = []
keywords = ["reservations", "lodging", "booking", "console", "scheduling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
udeastay = "udeastay.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["udeastay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
