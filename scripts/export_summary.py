"""Write the payroll summary CSV without going through the web app."""

from __future__ import annotations

import argparse
import importlib
from pathlib import Path

from dotenv import load_dotenv

from timekeeper.config import get_settings_module
from timekeeper.container import build_container, build_storage
from timekeeper.core.constants import SUMMARY_CSV_FILENAME
from timekeeper.core.exceptions import ValidationError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--out", type=Path, default=Path(SUMMARY_CSV_FILENAME))
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(
        backend=settings.STORAGE_BACKEND,
        data_path=getattr(settings, "DATA_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    container = build_container(storage=storage)

    try:
        csv_text = container.payroll_summary_service.export_csv()
    except ValidationError as e:
        raise SystemExit(str(e))

    args.out.write_text(csv_text, encoding="utf-8")
    print(f"OK: Summary written to {args.out}")


if __name__ == "__main__":
    main()
