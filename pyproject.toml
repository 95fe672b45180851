[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aimdkit"
version = "0.1.0"
description = "Building blocks for ab initio molecular dynamics: Gaussian basis functions, basis sets, LDA functionals and numeric helpers"
requires-python = ">=3.10"
keywords = [
    "quantum chemistry",
    "gaussian basis",
    "basis set",
    "density functional theory",
    "lda",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aimdkit-args = "aimdkit.cmd_line_args:main"

[tool.hatch.build.targets.wheel]
packages = ["aimdkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
