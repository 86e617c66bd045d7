[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simple_qsim"
version = "0.1.0"
description = "A small state-vector quantum circuit simulator with a Solovay-Kitaev transpiler, Pauli observables and variational demos"
requires-python = ">=3.10"
keywords = ["quantum", "simulator", "circuit", "solovay-kitaev", "vqe", "qcl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Quantum Computing",
]
dependencies = [
    "numpy",
    "scipy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
simple-qsim-vqe = "simple_qsim.vqe:main"
simple-qsim-transpile = "simple_qsim.transpile_demo:main"
simple-qsim-qcl = "simple_qsim.qcl:main"

[tool.hatch.build.targets.wheel]
packages = ["simple_qsim"]

[tool.pytest.ini_options]
addopts = "-ra"
