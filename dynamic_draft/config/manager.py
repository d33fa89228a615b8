from functools import lru_cache

import decouple

from dynamic_draft.config.settings.base import BackendBaseSettings
from dynamic_draft.config.settings.development import BackendDevSettings
from dynamic_draft.config.settings.environment import Environment
from dynamic_draft.config.settings.production import BackendProdSettings
from dynamic_draft.config.settings.staging import BackendStageSettings


class BackendSettingsFactory:
    def __init__(self, environment: str):
        self.environment = environment

    def __call__(self) -> BackendBaseSettings:
        if self.environment == Environment.PRODUCTION.value:
            return BackendProdSettings()
        elif self.environment == Environment.STAGING.value:
            return BackendStageSettings()
        return BackendDevSettings()


@lru_cache()
def get_settings() -> BackendBaseSettings:
    return BackendSettingsFactory(environment=decouple.config("ENVIRONMENT", default="DEV", cast=str))()  # type: ignore


settings: BackendBaseSettings = get_settings()
