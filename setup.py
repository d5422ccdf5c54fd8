import re
from pathlib import Path

from setuptools import find_packages, setup

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")


def load_requirements(filename="requirements.txt"):
    requirements_path = this_directory / filename
    if not requirements_path.exists():
        print(f"Warning: {filename} not found. Proceeding without it.")
        return []
    with open(requirements_path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]


def get_version(package_init_file_path: Path) -> str:
    """
    Reads the __version__ string from the given package's __init__.py file.
    """
    if not package_init_file_path.exists():
        raise RuntimeError(
            f"Package __init__.py not found at: {package_init_file_path}"
        )

    init_py_content = package_init_file_path.read_text(encoding="utf-8")
    match = re.search(
        r"^__version__\s*=\s*['\"]([^'\"]*)['\"]", init_py_content, re.MULTILINE
    )
    if not match:
        raise RuntimeError(
            f"Unable to find __version__ string in {package_init_file_path}"
        )
    return match.group(1)


VERSION = get_version(this_directory / "theme_sync" / "__init__.py")

setup(
    name="theme-sync",
    version=VERSION,
    author="Theme Sync Developers",
    author_email="theme-sync@example.com",
    description="A Qt window style sheet that follows the system light/dark preference.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests*", "build*", "dist*", "*.egg-info*", "scripts*"]),
    py_modules=["main"],
    install_requires=load_requirements(),
    extras_require={
        "test": load_requirements("requirements-dev.txt"),
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "theme-sync=main:main",
        ],
        "gui_scripts": [
            "theme-sync-gui=main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Topic :: Desktop Environment",
        "Environment :: X11 Applications :: Qt",
        "Framework :: PySide",
    ],
    keywords="qt pyside6 dark-mode theme stylesheet",
)
