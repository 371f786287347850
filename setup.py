"""
Custom setup.py to exclude pygame-dependent files from the wheel.

viewer.py and controls.py require pygame, which headless installs (CI,
batch runs) do not carry. __main__.py imports the viewer for its
interactive mode. They are only needed for local interactive use; install
the ``viewer`` extra and run from a checkout to get them.
"""

from setuptools import setup
from setuptools.command.build_py import build_py as _build_py


# Modules that need pygame and stay out of the wheel.
_EXCLUDE_MODULES = {"viewer", "controls", "__main__"}


class BuildPy(_build_py):
    """build_py that drops the interactive modules."""

    def find_package_modules(self, package, package_dir):
        modules = super().find_package_modules(package, package_dir)
        return [
            (pkg, mod, path)
            for (pkg, mod, path) in modules
            if mod not in _EXCLUDE_MODULES
        ]


setup(
    cmdclass={"build_py": BuildPy},
)
