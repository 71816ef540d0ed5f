[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "disarray"
version = "0.1.0"
description = "Small game toolkit: a lenient XML reader and writer, RM2 skinned model loading, vectors and colours, bitmap-font text helpers and non-blocking UDP messaging."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "framework", "xml", "rm2", "bitmap-font", "udp", "vectors"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["disarray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
