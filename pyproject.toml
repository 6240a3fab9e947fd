[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kuekit"
version = "0.1.0"
description = "Helpers for web back ends: errors, date and number conversion, pagination, response shapes, hashing, AES encryption, JSON logging and a small HTTP client"
requires-python = ">=3.10"
keywords = ["pagination", "bcrypt", "aes", "logging", "http", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "bcrypt",
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["kuekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
