"""Example: calling the service layer directly (no Flask).

Controllers are thin; the directory search below is the same call
``GET /directory`` makes.
"""

import importlib
import json

from config import get_settings_module

from src.school_hrms.school_hrms.container import build_container
from src.school_hrms.school_hrms.directory.model import DirectoryCriteria


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    result = container.directory_service.search(DirectoryCriteria(), page=1, limit=5)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
