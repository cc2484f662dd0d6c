from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "BRAT Converter API"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Collection layout
    CONF_FILENAME: str = "annotation.conf"
    ANN_SUFFIX: str = ".ann"
    TXT_SUFFIX: str = ".txt"
    TEST_DOC_PREFIX: str = "t_"

    # Output, octal when given as text: "600", "0600" and "0o600" are all 0o600
    OUTPUT_FILE_MODE: int = 0o600

    # Relations whose Arg1/Arg2 do not resolve to a parsed entity
    # get a zero span unless this is enabled
    STRICT_RELATIONS: bool = False

    # HTTP
    MAX_DOCUMENTS_PER_REQUEST: int = 500

    @field_validator("OUTPUT_FILE_MODE", mode="before")
    @classmethod
    def _parse_octal_mode(cls, v):
        if isinstance(v, str):
            return int(v.strip(), 8)
        return v


settings = Settings()
