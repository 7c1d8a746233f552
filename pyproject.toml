[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "makalu"
version = "0.1.0"
description = "Greetings, number and text helpers, a word dictionary, a bitcoin wallet, shapes, and two console games"
requires-python = ">=3.10"
dependencies = []
keywords = ["greeting", "dictionary", "wallet", "shapes", "lcr", "dice", "tic-tac-toe"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
makalu-hello = "makalu.hello:main"
makalu-greeter = "makalu.greet:main"
makalu-lcr = "makalu.lcr_cli:main"
makalu-xo = "makalu.xo:main"

[tool.hatch.build.targets.wheel]
packages = ["makalu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
