[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rowsum_sched"
version = "0.1.0"
description = "Matrix row summing with worker processes and threads, and FCFS, SJF and SRJF scheduling simulations."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "operating-systems",
    "scheduling",
    "fcfs",
    "sjf",
    "srjf",
    "memory-mapped",
    "processes",
    "threads",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rowsum-processes = "rowsum_sched.processes:main"
rowsum-threads = "rowsum_sched.threads:main"
rowsum-schedule = "rowsum_sched.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["rowsum_sched"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
