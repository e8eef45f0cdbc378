[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seaside"
version = "0.1.0"
description = "Configuration, constants and project loading for a MIPS interpreter engine"
requires-python = ">=3.11"
dependencies = [
    "semver",
]
keywords = ["mips", "interpreter", "emulator", "assembly", "simulator", "config"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["seaside"]

[tool.hatch.build.targets.sdist]
include = [
    "seaside",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
strict = true
