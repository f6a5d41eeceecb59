from decimal import Decimal

from examples_api.core.config import Settings
from examples_api.domain.model import Range


class SettingsConfigAdapter:
    """``ExampleConfigPort`` backed by application settings, read on every call."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def allowed_countries(self) -> set[str]:
        return self.settings.allowed_country_set

    def salary_range(self) -> Range[Decimal]:
        return Range(from_=self.settings.salary_min, to=self.settings.salary_max)
