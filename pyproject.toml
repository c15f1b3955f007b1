[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, self-contained design and resiliency patterns: circuit breakers, timed semaphores, deadlines, backoff schedules, rate limiting, fan-in/fan-out pipelines, pub-sub and the classic object-oriented patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "circuit-breaker",
    "semaphore",
    "deadline",
    "backoff",
    "rate-limiting",
    "pub-sub",
    "fan-in",
    "fan-out",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"
