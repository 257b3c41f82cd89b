[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dhcpwire"
version = "0.1.0"
description = "DHCPv6 option encoding and decoding, IANA registries, RFC 1035 labels, interface helpers and ZTP helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["dhcp", "dhcpv6", "networking", "iana", "rfc1035", "ztp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dhcpwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
