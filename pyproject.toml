[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "climbwall"
version = "0.1.0"
description = "Air hockey and territory-capture games for an augmented climbing wall, steered by a body tracker or the keyboard"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "climbing wall",
    "air hockey",
    "territory",
    "arcade",
    "body tracking",
    "pygame",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[project.scripts]
climbwall-hockey = "climbwall.hockey_starter:main"
climbwall-territory = "climbwall.territory_starter:main"

[tool.hatch.build.targets.wheel]
packages = ["climbwall"]

[tool.pytest.ini_options]
addopts = "-ra"
