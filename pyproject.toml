[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slkit"
version = "1.1.0"
description = "Small status-bar components, a status line generator, a file filter and a menu matcher"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = [
    "status",
    "statusbar",
    "monitoring",
    "battery",
    "cpu",
    "memory",
    "network",
    "menu",
    "stest",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slkit-status = "slkit.status:main"
slkit-stest = "slkit.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["slkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
