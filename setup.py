from pathlib import Path
import re

from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "scc" / "__init__.py"
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", init.read_text(encoding="utf-8"), re.M)
    if not match:
        raise RuntimeError("__version__ not found in src/scc/__init__.py")
    return match.group(1)


setup(
    name="scc",
    version=_read_version(),
    description="Strip C and C++ comments while preserving literals and line splices",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["scc = scc.cli:main"]},
)
