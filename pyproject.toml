[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "valik"
version = "1.0.0"
description = "K-mer shapes and thresholds, build settings, epsilon matches and GFF match handling for prefiltered approximate local alignment of nucleotide sequences."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "k-mer",
    "local alignment",
    "prefilter",
    "epsilon match",
    "gff",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["valik"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
