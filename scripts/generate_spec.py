#!/usr/bin/env python
"""Generate the OpenAPI documentation artifact served at /openapi.json.

Usage:
  python -m scripts.generate_spec
  python -m scripts.generate_spec --out build/openapi.json

Options:
  --out PATH        Write the JSON document to PATH instead of the default
                    leave_api/swagger-output.json (directories auto-created)

The target file is overwritten on every run. Static path docs come from the
route docstrings, entity schemas from the SQLAlchemy models; no database or
running server is needed.

Exit Codes:
  0 success
  1 any read/parse error (nothing is written)
"""
from __future__ import annotations
import argparse, json, logging, os, pathlib, sys

# Allow running from the repo root without installing
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from leave_api import DEFAULT_OPENAPI_OUTPUT  # noqa: E402
from leave_api.openapi import build_openapi_spec  # noqa: E402

log = logging.getLogger('generate_spec')


def write_spec(out_path: pathlib.Path, spec: dict) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(spec, indent=2, ensure_ascii=False) + '\n', encoding='utf-8')


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    p = argparse.ArgumentParser(description="Generate the OpenAPI documentation artifact")
    p.add_argument('--out', dest='out', default=DEFAULT_OPENAPI_OUTPUT, help='Path to write JSON spec')
    args = p.parse_args(argv)

    try:
        spec = build_openapi_spec()
        write_spec(pathlib.Path(args.out), spec)
    except Exception:
        log.exception('OpenAPI generation failed')
        return 1

    log.info(
        'Wrote %s (%d paths, %d schemas)',
        args.out, len(spec['paths']), len(spec['components']['schemas']),
    )
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
