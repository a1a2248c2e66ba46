[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluentkit"
version = "1.0.0"
description = "Building blocks for Fluent-style user interfaces: themes, text styles, tree and view models, watermark layout, and QR / Micro QR masking."
requires-python = ">=3.10"
dependencies = []
keywords = ["fluent", "ui", "theme", "tree-model", "view-model", "qr-code", "micro-qr", "watermark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fluentkit"]

[tool.hatch.build.targets.sdist]
include = ["fluentkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
disallow_untyped_defs = true
