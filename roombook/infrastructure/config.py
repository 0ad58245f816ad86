from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+pysqlite:///:memory:"
    # only approved reservations of the same room can block an approval
    strict_conflict_check: bool = False
    serialize_approvals: bool = False
    log_level: str = "INFO"


settings = Settings()
