from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    APP_NAME: str = "Closet Outfits API"
    APP_ENV: str = "dev"
    API_PREFIX: str = "/v1"
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    # Closet snapshot limits; scoring walks every top x bottom x shoes combination
    MAX_CLOSET_ITEMS: int = 500
    MAX_ITEMS_PER_CATEGORY: int = 40
    # Signed photo URLs
    PHOTO_URL_TTL_S: int = 3600
    PHOTO_UPLOAD_TTL_S: int = 900
    PHOTO_DELETE_BATCH: int = 100

    @property
    def cors_origin_list(self) -> List[str]:
        val = self.CORS_ORIGINS
        if not val: return []
        if val == "*": return ["*"]
        return [v.strip() for v in val.split(",") if v.strip()]

settings = Settings()
