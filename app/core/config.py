from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # 数据库配置
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "123456"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "orders"
    DATABASE_URL: Optional[str] = None  # 设置后覆盖上面的 Postgres 配置
    ORDER_STORE_ENABLED: bool = True

    # 邮件配置
    EMAIL_USER: str = ""
    EMAIL_PASS: str = ""
    ADMIN_EMAIL: Optional[str] = None  # 默认发给 EMAIL_USER
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 465
    SMTP_USE_SSL: bool = True
    SMTP_TIMEOUT: float = 30.0

    # 店铺信息
    STORE_NAME: str = "Farid Express"
    CURRENCY: str = "OMR"

    # 跨域白名单
    CORS_ALLOWED_ORIGINS: List[str] = [
        "https://farideducat.github.io",
        "https://farideducat.github.io/partsStore",
    ]

    PORT: int = 5000

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://"
            f"{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/"
            f"{self.POSTGRES_DB}"
        )

    @property
    def admin_email(self) -> str:
        return self.ADMIN_EMAIL or self.EMAIL_USER

settings = Settings()
