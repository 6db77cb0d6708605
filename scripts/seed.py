#!/usr/bin/env python
"""Idempotent seed script for benefits & employees.

Usage:
    python -m scripts.seed             # create tables and seed normally
    python -m scripts.seed --reset     # drop all tables first
    python -m scripts.seed --dry-run   # run logic then rollback (no DB changes)
"""
from __future__ import annotations
import argparse, logging, os, sys
from datetime import datetime
from sqlalchemy import select

# Allow running from the repo root without installing
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from leave_api import create_app  # noqa: E402
from leave_api.models.base import load_models  # noqa: E402
from leave_api.models.benefit import Benefit  # noqa: E402
from leave_api.models.employee import Employee  # noqa: E402
from seeds.hr import BENEFITS, EMPLOYEES  # noqa: E402

log = logging.getLogger('seed')


def ensure_benefits(session) -> int:
    existing = {b.name for b in session.execute(select(Benefit)).scalars().all()}
    created = 0
    for row in BENEFITS:
        if row['name'] not in existing:
            session.add(Benefit(**row))
            created += 1
    return created


def ensure_employees(session) -> int:
    existing = {(e.first_name, e.last_name) for e in session.execute(select(Employee)).scalars().all()}
    created = 0
    for row in EMPLOYEES:
        if (row['first_name'], row['last_name']) in existing:
            continue
        session.add(Employee(**{**row, 'date_of_birth': datetime.fromisoformat(row['date_of_birth'])}))
        created += 1
    return created


def seed(session) -> dict:
    counts = {'benefits': ensure_benefits(session)}
    session.flush()
    counts['employees'] = ensure_employees(session)
    session.flush()
    return counts


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    p = argparse.ArgumentParser(description='Seed benefits and employees')
    p.add_argument('--reset', action='store_true', help='Drop all tables before seeding')
    p.add_argument('--dry-run', action='store_true', help='Rollback instead of commit')
    args = p.parse_args(argv)

    app = create_app()
    store = app.extensions['store']
    base = load_models()
    engine = store.session.get_bind()
    if args.reset:
        base.metadata.drop_all(engine)
    base.metadata.create_all(engine)
    log.info('Start seeding %s', app.config['DATABASE_URL'])
    session = store.session
    counts = seed(session)
    if args.dry_run:
        session.rollback()
        log.info('Dry run: rolled back %s', counts)
    else:
        session.commit()
        log.info('Seeding finished: %s', counts)
    store.remove()
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
