[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sroperator"
version = "0.1.0"
description = "Building blocks for managing special resources on a cluster: custom resource models, node caching, state templates, node labelling and cluster operator status."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "kubernetes",
    "openshift",
    "operator",
    "special-resource",
    "driver-container",
    "helm",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sroperator = "sroperator.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sroperator"]

[tool.hatch.build.targets.sdist]
include = ["sroperator", "tests", "README.md", "pyproject.toml"]

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
