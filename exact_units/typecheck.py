"""Static dimension checking using mypy.

Units and quantities are generic over a quantity kind (see
``exact_units.units.types``), so mixing kinds, e.g. adding a
``Quantity[Length]`` to a ``Quantity[Time]``, is a type error. This module runs
a mypy build over the given files and reports the errors that involve
quantities or units.
"""

import re
from pathlib import Path

from mypy.build import BuildResult, BuildSource, build
from mypy.options import Options

from . import errors

_ERROR_RE = re.compile(
    r"(?P<path>.+?):(?P<lineno>\d+):(?:\d+:)? error: (?P<message>.*?)"
    r"(?:  \[(?P<code>[\w-]+)\])?$"
)
_KIND_RE = re.compile(r"\b\w*(Quantity|Unit)\b")


class DimensionTypeChecker:
    """Uses mypy to find operations mixing incompatible quantity kinds."""

    @staticmethod
    def _find_py_files_and_modules(paths: list[Path]) -> list[tuple[Path, str]]:
        """Find all Python files with module names from a list of paths.

        Returns:
            List of tuples: (absolute file path, module name)
        """
        result: list[tuple[Path, str]] = []
        for input_path in paths:
            input_path = input_path.resolve()
            if input_path.is_file() and input_path.suffix == ".py":
                module_name = DimensionTypeChecker._module_name_from_path(input_path)
                result.append((input_path, module_name))
            elif input_path.is_dir():
                for file_path in input_path.rglob("*.py"):
                    file_path = file_path.resolve()
                    module_name = DimensionTypeChecker._module_name_from_path(file_path)
                    result.append((file_path, module_name))
        return result

    @staticmethod
    def _module_name_from_path(file_path: Path) -> str:
        """Compute the module name for a Python file, including all parent packages.

        For __init__.py, returns the package name.
        """
        # Walk up as long as __init__.py exists, for full package hierarchy
        if file_path.name == "__init__.py":
            parts = []
        else:
            parts = [file_path.with_suffix("").name]
        current = file_path.parent
        while (current / "__init__.py").exists():
            parts.insert(0, current.name)
            current = current.parent
        return ".".join(parts)

    def __init__(self) -> None:
        """Initialise a new checker."""
        self.errors: list[errors.DimensionTypeError] = []

    def check(self, paths: list[Path]) -> list[errors.DimensionTypeError]:
        """Type check the given file(s) or directory(ies).

        Args:
            paths: List of file or directory paths to analyze.

        Returns:
            The errors found, also kept in ``self.errors``.
        """
        files_and_modules = self._find_py_files_and_modules(paths)
        if not files_and_modules:
            return self.errors
        build_result = self._mypy_build(files_and_modules)
        for line in build_result.errors:
            match = _ERROR_RE.fullmatch(line)
            if not match or not _KIND_RE.search(match["message"]):
                continue
            self.errors.append(
                errors.q100_error_factory(
                    match["path"], int(match["lineno"]), match["message"]
                )
            )
        return self.errors

    @staticmethod
    def _mypy_build(files_and_modules: list[tuple[Path, str]]) -> BuildResult:
        options = Options()
        options.incremental = False
        options.show_traceback = True
        options.namespace_packages = True
        options.ignore_missing_imports = True
        options.follow_imports = "silent"
        options.check_untyped_defs = True

        python_path_roots: set[Path] = set()
        for file_path, module_name in files_and_modules:
            python_path_roots.add(
                Path(*file_path.parts[: -len(module_name.split("."))])
            )
        # Make this package visible when it is used from a source checkout;
        # mypy refuses site-packages directories on its search path.
        package_root = Path(__file__).resolve().parents[1]
        if not {"site-packages", "dist-packages"} & set(package_root.parts):
            python_path_roots.add(package_root)
        options.mypy_path = [str(path) for path in sorted(python_path_roots)]

        sources = [
            BuildSource(str(file), module_name, None)
            for file, module_name in files_and_modules
        ]
        return build(sources=sources, options=options)
