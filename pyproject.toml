[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyseeker"
version = "0.1.0"
description = "Compute where stars, planets, the Sun and the Moon stand in an observer's sky"
requires-python = ">=3.10"
dependencies = [
    "zstandard",
]
keywords = [
    "astronomy",
    "ephemeris",
    "azimuth",
    "altitude",
    "stars",
    "planets",
    "bright star catalogue",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
skyseeker-bsc5 = "skyseeker.bsc5:main"

[tool.hatch.build.targets.wheel]
packages = ["skyseeker"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
