[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fujihack"
version = "0.1.0"
description = "Host-side tools for Fujifilm camera firmware research: ELF parsing, camera model data, screen and menu simulation, symbol tables and PTP hijack helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fujifilm",
    "firmware",
    "arm",
    "elf",
    "ptp",
    "embedded",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
frontier-pack = "fujihack.pack:main"

[tool.hatch.build.targets.wheel]
packages = ["fujihack"]

[tool.hatch.build.targets.sdist]
include = ["fujihack", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
