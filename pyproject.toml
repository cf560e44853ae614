[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hivelib"
version = "0.1.0"
description = "Character, memory and string helpers, a linked list, a printf formatter, a line reader, a signal messenger and a dining philosophers simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "strings",
    "memory",
    "printf",
    "linked-list",
    "line-reader",
    "signals",
    "dining-philosophers",
    "threads",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hive-gnl = "hivelib.lines:main"
hive-talk-client = "hivelib.talk:client_main"
hive-talk-server = "hivelib.talk:server_main"
hive-philo = "hivelib.philosophers:main"
hive-print-params = "hivelib.commands:print_params_main"
hive-sort-params = "hivelib.commands:sort_params_main"
hive-display-file = "hivelib.commands:display_file_main"

[tool.hatch.build.targets.wheel]
packages = ["hivelib"]

[tool.hatch.build.targets.sdist]
include = ["hivelib", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
