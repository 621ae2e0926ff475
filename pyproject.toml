[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agentcore"
version = "0.1.0"
description = "Pure, deterministic building blocks for LLM agents: conversations, reasoning state machines, multi-agent orchestration and an Elm-style application core."
requires-python = ">=3.10"
dependencies = []
keywords = ["llm", "agents", "state-machine", "orchestration", "multi-agent", "elm-architecture"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["agentcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
