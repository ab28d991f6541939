[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wtui"
version = "0.1.0"
description = "Terminal panels for browsing task worktrees and their git services"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "worktree", "tui", "terminal", "panels"]
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
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wtui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
