[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subjectfinder"
version = "1.0.0"
description = "Find students by the subjects they take: required and excluded subject filters over a plain-text roster, with a Tkinter desktop interface."
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "subjects", "roster", "search", "education", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "freezegun"]

[project.gui-scripts]
subjectfinder = "subjectfinder.app:main"

[tool.hatch.build.targets.wheel]
packages = ["subjectfinder"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
