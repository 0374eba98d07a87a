[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small teaching exercises: household device models, random sample statistics and a wagon-sorting train."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "statistics", "histogram", "stack", "interfaces"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-household = "labkit.household:main"
labkit-stats = "labkit.stats:main"
labkit-train = "labkit.train:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
