[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enclavesim"
version = "0.1.0"
description = "A simulated secure-enclave runtime with sealing, signing, attestation, sandboxing and secure channels"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "enclave",
    "simulation",
    "sealing",
    "attestation",
    "sandbox",
    "secure-channel",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
enclavesim = "enclavesim.cli:main"
enclavesim-debug = "enclavesim.tools.debug_cli:main"
enclavesim-inspect = "enclavesim.tools.inspector:main"
enclavesim-keygen = "enclavesim.tools.keygen:main"

[tool.hatch.build.targets.wheel]
packages = ["enclavesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
