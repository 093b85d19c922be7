[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "padboard"
version = "0.1.0"
description = "A keyboard-driven sound launchpad for the terminal: trigger loops and one-shots and mix them in channel groups"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["launchpad", "sampler", "loops", "audio", "mixer", "terminal"]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
padboard = "padboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["padboard"]

[tool.pytest.ini_options]
addopts = "-ra"
