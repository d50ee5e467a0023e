[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicebook"
version = "0.1.0"
description = "Worked programming exercises: number puzzles, interview puzzles, a tiny line search tool and small modelling examples"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "project-euler", "algorithms", "puzzles", "grep", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
minigrep = "practicebook.minigrep:main"
pyramid = "practicebook.basics:pyramid_main"

[tool.hatch.build.targets.wheel]
packages = ["practicebook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
