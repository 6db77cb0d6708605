"""Helper functions for the OpenAPI builder.

Static docs live as YAML after a `---` line in route docstrings. The source
files are parsed with `ast`, never imported, so building the document needs
neither a database nor a running app.
"""
import ast
import json
import pathlib
from typing import Any, Dict, Iterable, List

import yaml

from .constants import DOC_MARKER


class DocSourceError(Exception):
    pass


def load_yaml_from_docstring(docstring: str) -> Dict[str, Any]:
    lines = docstring.splitlines()
    for i, line in enumerate(lines):
        if line.strip() == DOC_MARKER:
            fragment = yaml.safe_load('\n'.join(lines[i + 1:]))
            if fragment is None:
                return {}
            if not isinstance(fragment, dict):
                raise DocSourceError('docstring YAML must be a mapping of paths')
            try:
                # JSON-safe: stringifies status-code keys, rejects YAML dates
                return json.loads(json.dumps(fragment))
            except TypeError as e:
                raise DocSourceError(str(e)) from e
    return {}


def docstrings_in(path: str) -> List[str]:
    source = pathlib.Path(path).read_text(encoding='utf-8')
    tree = ast.parse(source, filename=path)
    funcs = [n for n in ast.walk(tree) if isinstance(n, (ast.FunctionDef, ast.AsyncFunctionDef))]
    # ast.walk is breadth-first; keep source order
    funcs.sort(key=lambda n: n.lineno)
    return [doc for doc in (ast.get_docstring(n) for n in funcs) if doc]


def merge_paths(target: Dict[str, Any], fragment: Dict[str, Any]) -> Dict[str, Any]:
    for path, ops in fragment.items():
        if not isinstance(ops, dict):
            raise DocSourceError(f'operations for {path} must be a mapping')
        target.setdefault(str(path), {}).update(ops)
    return target


def collect_paths(sources: Iterable[str]) -> Dict[str, Any]:
    paths: Dict[str, Any] = {}
    for src in sources:
        for doc in docstrings_in(src):
            try:
                merge_paths(paths, load_yaml_from_docstring(doc))
            except yaml.YAMLError as e:
                raise DocSourceError(f'{src}: {e}') from e
    return paths


__all__ = ["DocSourceError", "load_yaml_from_docstring", "docstrings_in", "merge_paths", "collect_paths"]
