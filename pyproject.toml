[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hybridpath"
version = "0.1.0"
description = "Single-source shortest paths with a degree-aware hybrid Dijkstra scheduler over CSR graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["dijkstra", "shortest-path", "graph", "csr", "sssp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hybridpath = "hybridpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hybridpath"]

[tool.pytest.ini_options]
addopts = "-ra"
