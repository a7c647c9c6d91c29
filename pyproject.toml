[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mysh"
version = "0.1.0"
description = "A minimal command shell with cd, setenv, unsetenv, env and exit built-ins and PATH lookup"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "minishell", "environment", "printf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mysh = "mysh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["mysh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
