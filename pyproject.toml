[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pycoremark"
version = "1.0.0"
description = "CPU benchmark workloads (matrix arithmetic and a number-recognising state machine) with CRC-checked results"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "cpu", "crc", "performance", "matrix", "state-machine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pycoremark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
