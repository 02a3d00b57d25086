[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "merkeldecks"
version = "1.0.0"
description = "A simulated currency exchange with an order book and wallet, plus a track-mixing model for DJ decks"
requires-python = ">=3.10"
dependencies = []
keywords = ["exchange", "order-book", "trading", "simulation", "wallet", "dj", "mixer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Multimedia :: Sound/Audio :: Mixers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
merkelrex = "merkeldecks.exchange.merkelmain:main"

[tool.hatch.build.targets.wheel]
packages = ["merkeldecks"]

[tool.pytest.ini_options]
addopts = "-ra"
