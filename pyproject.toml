[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grocerybank"
version = "0.1.0"
description = "A small grocery checkout with shopping carts, multi-currency prices and bank accounts with daily spending limits."
requires-python = ">=3.10"
dependencies = []
keywords = ["grocery", "shop", "cart", "checkout", "bank", "currency", "point-of-sale"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grocerybank = "grocerybank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grocerybank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
