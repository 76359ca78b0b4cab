[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termwidgets"
version = "0.1.0"
description = "State, layout and text rendering for terminal widgets: edit lines, pagers, menus, multiplexers and more"
requires-python = ">=3.10"
keywords = ["terminal", "tui", "widgets", "console", "text-mode"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Terminals",
    "Typing :: Typed",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["termwidgets"]

[tool.pytest.ini_options]
addopts = "-ra"
