[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jigglydrum"
version = "0.1.0"
description = "A tiny drum pad toy: press keys to play kick and snare samples while a jiggling square reacts."
requires-python = ">=3.10"
keywords = ["drum", "pygame", "audio", "toy", "ctags"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jigglydrum = "jigglydrum.app:main"
ctags-dlist = "jigglydrum.ctags_dlist:main"

[tool.hatch.build.targets.wheel]
packages = ["jigglydrum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
