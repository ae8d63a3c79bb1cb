from pathlib import Path
from setuptools import setup, find_packages
import re


HERE = Path(__file__).parent


def _read_text(p: Path) -> str:
    """Read a UTF-8 text file, returning an empty string if it doesn't exist."""
    if not p.exists():
        return ""
    return p.read_text(encoding="utf-8")


def read_requirements(req_file: Path):
    lines = _read_text(req_file).splitlines()
    return [l.strip() for l in lines if l.strip() and not l.strip().startswith("#")]


def get_version(pkg_init: Path):
    m = re.search(r"__version__\s*=\s*['\"]([^'\"]+)['\"]", _read_text(pkg_init))
    return m.group(1) if m else "0.0.0"


long_description = _read_text(HERE / "README.md")

setup(
    name="android-build-props",
    version=get_version(HERE / "src" / "android_build_props" / "__init__.py"),
    description="Read AndroidManifest.xml build metadata and record ProGuard UUIDs in a properties file",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=read_requirements(HERE / "requirements.txt"),
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "android-build-props=android_build_props.main:main",
        ]
    },
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
