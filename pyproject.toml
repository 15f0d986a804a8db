[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdpwire"
version = "0.1.0"
description = "Typed Chrome DevTools Protocol messages and a WebSocket transport for driving a running browser"
requires-python = ">=3.10"
keywords = ["chrome", "chromium", "devtools", "cdp", "websocket", "headless", "automation"]
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
    "Topic :: Internet :: WWW/HTTP :: Browsers",
    "Topic :: Software Development :: Testing",
]
dependencies = [
    "websocket-client>=1.6",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "websockets>=12.0",
]

[tool.hatch.build.targets.wheel]
packages = ["cdpwire"]

[tool.hatch.build.targets.sdist]
include = ["cdpwire", "tests", "README.md", "pyproject.toml"]

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
