[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bn128kit"
version = "0.1.0"
description = "Pure-Python prime and extension fields, alt_bn128 curve arithmetic, multi-scalar multiplication, FFT and zkey/wtns header readers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "alt_bn128",
    "bn254",
    "elliptic-curve",
    "finite-field",
    "multiexp",
    "msm",
    "fft",
    "zkey",
    "wtns",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bn128kit"]

[tool.hatch.build.targets.sdist]
include = ["bn128kit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
