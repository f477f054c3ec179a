from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from patent_browser.config.model import GlobalConfig
from patent_browser.core.dataset import DatasetStore
from patent_browser.core.view_registry import ViewRegistry
from patent_browser.services.dashboard_service import PatentDashboard


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    store: DatasetStore

    # Startup session: carries the seeded default selection for the initial layout
    dashboard: Optional[PatentDashboard] = None
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.dashboard is None:
            raise RuntimeError("AppConfig.dashboard must be initialized.")
