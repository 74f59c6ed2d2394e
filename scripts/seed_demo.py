#!/usr/bin/env python3
"""Seed a demo catalog database.

Usage:
    python scripts/seed_demo.py [--db demo.db]

This script:
1. Initializes the demo database
2. Creates a handful of models
3. Creates videos linked to those models
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from mediadesk.catalog import models as model_catalog  # noqa: E402
from mediadesk.catalog import videos as video_catalog  # noqa: E402
from mediadesk.db.session import get_db_session, init_db  # noqa: E402
from mediadesk.models.types import ModelPayload, VideoPayload  # noqa: E402

DEMO_DB_PATH = PROJECT_ROOT / "demo.db"

DEMO_MODELS = [
    {"name": "Ava", "ethnicity": "Latina", "gender": "FEMALE", "dateOfBirth": "1994-03-12"},
    {"name": "Bea", "ethnicity": "Asian", "gender": "FEMALE"},
    {"name": "Cole", "ethnicity": "Caucasian", "gender": "MALE", "measurements": "180cm"},
    {"name": "Dre", "ethnicity": "Ebony", "gender": "NON_BINARY"},
]

DEMO_VIDEOS = [
    ("Studio session", [0]),
    ("Beach day", [0, 1]),
    ("Behind the scenes", [2]),
    ("Interview", []),
    ("Duo shoot", [1, 3]),
]


def seed(db_path: Path) -> None:
    """Create demo models and videos in db_path."""
    init_db(db_path)

    with get_db_session(db_path) as session:
        model_ids = []
        for fields in DEMO_MODELS:
            model = model_catalog.create_model(session, ModelPayload(**fields))
            model_ids.append(model.id)
            print(f"Created model {model.name} ({model.id})")

        for index, (title, owners) in enumerate(DEMO_VIDEOS):
            payload = VideoPayload(
                title=title,
                url=f"https://example.com/videos/{index}.mp4",
                duration=60 * (index + 1),
                views=index * 10,
                model_ids=[model_ids[i] for i in owners],
            )
            video = video_catalog.create_video(session, payload)
            print(f"Created video {video.title} ({video.id}) with {len(video.models)} model(s)")


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed a demo catalog database")
    parser.add_argument("--db", type=Path, default=DEMO_DB_PATH, help="SQLite file to seed")
    args = parser.parse_args()

    seed(args.db)
    print(f"\nDemo database ready: {args.db}")
    print(f"Run: MEDIADESK_DB_PATH={args.db} uvicorn mediadesk.api.app:app --reload")
    return 0


if __name__ == "__main__":
    sys.exit(main())
