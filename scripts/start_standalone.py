import os
import subprocess
import sys
from pathlib import Path

from sqlalchemy.engine import make_url


def _env_default(name: str, value: str) -> None:
    current = os.environ.get(name)
    if current is None or current.strip() == "":
        os.environ[name] = value


def _prepare_environment() -> None:
    _env_default("APP_PORT", "8000")
    _env_default("APP_HOST", "127.0.0.1")
    _env_default("DATABASE_URL", "sqlite+pysqlite:///./data/classpoints.db")
    _env_default("SEED_SAMPLE_STUDENTS", "true")
    _env_default("LOG_LEVEL", "INFO")


def _ensure_storage_paths() -> None:
    try:
        parsed_url = make_url(os.environ["DATABASE_URL"])
    except Exception:
        return

    if not parsed_url.drivername.startswith("sqlite"):
        return

    db_path = parsed_url.database
    if not db_path or db_path == ":memory:":
        return

    Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def _run(cmd: list[str]) -> None:
    print(">", " ".join(cmd), flush=True)
    subprocess.run(cmd, check=True)


def main() -> None:
    _prepare_environment()
    _ensure_storage_paths()

    print("Starting standalone class points backend with:", flush=True)
    print(f"  DATABASE_URL={os.environ['DATABASE_URL']}", flush=True)
    print(f"  SEED_SAMPLE_STUDENTS={os.environ['SEED_SAMPLE_STUDENTS']}", flush=True)

    _run([sys.executable, "scripts/init_db.py"])

    os.execvp(
        "uvicorn",
        [
            "uvicorn",
            "classpoints.main:app",
            "--host",
            os.environ["APP_HOST"],
            "--port",
            os.environ["APP_PORT"],
        ],
    )


if __name__ == "__main__":
    main()
