from pathlib import Path
import sys

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from classpoints.core.config import get_settings
from classpoints.db.init_db import init_db
from classpoints.db.session import create_db_engine, create_session_factory


def main() -> None:
    settings = get_settings()
    engine = create_db_engine(settings)
    try:
        inserted = init_db(engine, create_session_factory(engine), seed_sample_students=settings.seed_sample_students)
    finally:
        engine.dispose()
    print(f"Inserted settings: {inserted['settings']}, students: {inserted['students']}")


if __name__ == "__main__":
    main()
