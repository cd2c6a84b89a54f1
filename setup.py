import os, re
from setuptools import setup, find_packages

# Read the README file
with open("README.md") as f:
    mixinject_readme = f.read()

def read_file(filepath: str) -> str:
    """Read and return the content of a file."""
    with open(filepath, "r", encoding="utf-8") as f:
        return f.read().strip()

def get_dependencies() -> list:
    """Retrieve dependencies from the requirements file."""
    depfile = "requirements.txt"
    if os.path.exists(depfile):
        return [
            line.strip() for line in read_file(depfile).splitlines() 
            if line.strip() and not line.startswith("#")
        ]
    return []

def get_packages() -> list:
    """Retrieve the packages of the project, excluding tests and examples."""
    packages = find_packages(include=["mixinject", "mixinject.*"])
    if packages:
        return packages
    raise RuntimeError(
        "No package found. Ensure your project contains a valid Python package."
    )

def get_version() -> str:
    """Retrieve the package version from the version file."""
    versionfile = os.path.join(get_packages()[0], "_version.py")

    if os.path.exists(versionfile):
        verstrline = read_file(versionfile)
        version_match = re.search(
            r"^__version__ = ['\"]([^'\"]*)['\"]", verstrline, re.M
        )
        if version_match:
            return version_match.group(1)
        raise RuntimeError("Unable to find version string in '_version.py'.")

    raise FileNotFoundError("Version file '_version.py' not found.")

extras_require = {
    # Testing dependencies
    "test": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "hypothesis>=6.88.0",  # Property-based testing
    ],

    # Development dependencies
    "dev": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "hypothesis>=6.88.0",
        "black>=23.0.0",
        "flake8>=6.0.0",
        "pyright>=1.1.0",
    ],
}

# Setup the package
if __name__ == '__main__':
    setup(
        name="mixinject",
        version=get_version(),
        description="A small registry for naming, extending and injecting mixins into host objects.",
        long_description=mixinject_readme,
        long_description_content_type="text/markdown",
        license="MIT",
        packages=get_packages(),
        install_requires=get_dependencies(),
        extras_require=extras_require,
        python_requires=">=3.8",
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Topic :: Utilities",
        ],
        keywords="mixin registry dependency-injection composition",
    )
