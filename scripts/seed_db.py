from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "absenta"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from absenta.database.bootstrap import DEMO_ADMINS, apply_seed_sql, ensure_demo_admins


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_admins(db_config)

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(admins: {', '.join(nis for nis, *_ in DEMO_ADMINS)})"
    )


if __name__ == "__main__":
    main()
