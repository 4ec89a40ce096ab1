[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "echometer"
version = "0.1.0"
description = "Uppercase echo servers and round-trip latency clients over TCP, MPTCP and UDP"
requires-python = ">=3.10"
dependencies = []
keywords = ["echo", "latency", "rtt", "tcp", "mptcp", "udp", "network", "throughput"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
echometer-server = "echometer.server:main"
echometer-client = "echometer.client:main"

[tool.setuptools.packages.find]
include = ["echometer*"]

[tool.pytest.ini_options]
addopts = "-ra"
