[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sspcommon"
version = "0.13.0"
description = "Reconciliation helpers for operator-managed cluster resources: version cache, app labels, create-or-update and cleanup"
requires-python = ">=3.10"
dependencies = []
keywords = ["operator", "reconcile", "kubernetes", "labels", "cache"]
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
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sspcommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
