"""Seed a problem template from a JSON or CSV file.

Usage:
    python -m app.features.problems.seed problems.json --template neet250.v1
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import List

from app.common.errors import ValidationError
from .schemas import ProblemSeedRow

logger = logging.getLogger("catalog.seed")


def load_rows(path: Path) -> List[ProblemSeedRow]:
    """Parse a seed file; JSON holds a list of objects, CSV has a header row."""
    if path.suffix.lower() == ".json":
        raw = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(raw, dict):
            raw = raw.get("problems", [])
    elif path.suffix.lower() == ".csv":
        with path.open(newline="", encoding="utf-8") as fh:
            raw = list(csv.DictReader(fh))
    else:
        raise ValidationError(f"Unsupported seed file type: {path.suffix}")
    return [ProblemSeedRow.model_validate(item) for item in raw]


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed a problem template version")
    parser.add_argument("path", type=Path, help="JSON or CSV file with the catalog rows")
    parser.add_argument("--template", dest="template_version", required=True, help="Template version, e.g. neet250.v1")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    from app.DB.base import Base
    from app.DB.session import SessionLocal, engine
    import app.DB.models  # noqa: F401
    from .service import seed_template

    Base.metadata.create_all(bind=engine)
    rows = load_rows(args.path)
    with SessionLocal() as db:
        try:
            count = seed_template(db, args.template_version, rows)
        except ValidationError as exc:
            logger.error("seed failed: %s", exc)
            return 1
    print(f"Seeded {count} problems into {args.template_version}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
