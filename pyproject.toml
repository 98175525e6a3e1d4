[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asrdecode"
version = "0.1.0"
description = "CTC decoding tools for speech recognition: greedy decoding, beam bookkeeping, grapheme lexicons and lexicon FSTs"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "asr",
    "speech-recognition",
    "ctc",
    "greedy-decoding",
    "beam-search",
    "lexicon",
    "fst",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
asrdecode-setup = "asrdecode.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["asrdecode"]

[tool.pytest.ini_options]
addopts = "-ra"
