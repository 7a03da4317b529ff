[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listbench"
version = "0.1.0"
description = "Benchmarks for a sorted linked list under serial, mutex and read-write lock workloads, plus small threading exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "linked list",
    "threading",
    "mutex",
    "read-write lock",
    "concurrency",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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

[project.scripts]
listbench = "listbench.cli:main"
listbench-pi = "listbench.pi:main"
listbench-matvec = "listbench.matvec:main"
listbench-hello = "listbench.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["listbench"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
