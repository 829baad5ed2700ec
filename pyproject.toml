[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edgellm"
version = "1.0.0"
description = "HTTP handlers, Flask middleware and a command-line launcher for a decentralized LLM inference backend"
requires-python = ">=3.10"
keywords = ["llm", "inference", "http", "vllm", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
edgellm = "edgellm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["edgellm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
