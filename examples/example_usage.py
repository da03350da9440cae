"""Example: build a dashboard report through the service layer (no Flask).

Controllers are a thin layer; the report logic lives in DashboardStatsService.
"""

import importlib
import json

from config import get_settings_module

from src.hris_dashboard.hris_dashboard.container import build_container
from src.hris_dashboard.hris_dashboard.core.enums import Role
from src.hris_dashboard.hris_dashboard.scope.model import CallerIdentity


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, utc_offset_hours=settings.UTC_OFFSET_HOURS)
    caller = CallerIdentity(user_id=1, role=Role.ADMIN, tenant_id=1)
    report = container.stats_service.build(caller, "month")
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
