[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vnckit"
version = "0.1.0"
description = "Building blocks for VNC clients: VNC-flavoured DES, Diffie-Hellman helpers, audio format types and thread-backed coroutines"
requires-python = ">=3.10"
dependencies = []
keywords = ["vnc", "rfb", "des", "diffie-hellman", "coroutine", "remote-desktop"]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vnckit"]

[tool.pytest.ini_options]
addopts = "-ra"
