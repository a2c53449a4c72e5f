[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aprstrack"
version = "0.1.0"
description = "APRS position packet assembly, AX.25 UI framing and Bell 202 AFSK sample generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["aprs", "ax25", "afsk", "hdlc", "ham radio", "tracker", "bell 202", "crc-ccitt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aprstrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
