[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "domainscope"
version = "0.1.0"
description = "Terminal tool that looks up a domain's common hosts, their addresses and reverse DNS names."
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "dig", "ptr", "reverse-dns", "ping", "terminal", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
domainscope = "domainscope.app:main"

[tool.hatch.build.targets.wheel]
packages = ["domainscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
