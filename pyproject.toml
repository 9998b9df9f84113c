[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptotracker"
version = "0.1.0"
description = "A small web application that lists cryptocurrencies and tracks a personal portfolio"
requires-python = ">=3.10"
keywords = ["cryptocurrency", "portfolio", "tracker", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = [
    "flask>=2.2",
    "markupsafe>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
cryptotracker = "cryptotracker.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptotracker"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
