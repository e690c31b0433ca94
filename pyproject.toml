[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wylath"
version = "0.1.0"
description = "Bitboard chess engine core: FEN parsing, magic-bitboard attack tables and board display"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "magic bitboards", "fen"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wylath = "wylath.cli:main"
wylath-magic = "wylath.magic:main"

[tool.hatch.build.targets.wheel]
packages = ["wylath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
