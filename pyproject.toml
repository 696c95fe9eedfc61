[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gp100cc"
version = "0.1.0"
description = "Turn the expression pedal SysEx of a VALETON GP-100 into MIDI control change messages"
requires-python = ">=3.10"
dependencies = ["mido"]
keywords = ["midi", "sysex", "expression pedal", "control change", "gp-100"]
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
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gp100cc = "gp100cc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gp100cc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
