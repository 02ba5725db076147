[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlfqsim"
version = "0.1.0"
description = "Multi-level feedback queue CPU scheduling simulator with RR, SJF and STCF levels"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "mlfq", "round-robin", "sjf", "stcf", "operating-systems", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mlfqsim = "mlfqsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mlfqsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
