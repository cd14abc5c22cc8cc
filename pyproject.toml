[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "objstore-proxy"
version = "0.1.0"
description = "Request routing and authorization for a bucket-aware object storage proxy"
requires-python = ">=3.10"
dependencies = []
keywords = ["object-storage", "s3", "proxy", "bucket", "authorization", "sigv4"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Proxy Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["objstore_proxy"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
