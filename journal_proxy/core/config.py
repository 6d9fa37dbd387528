import os

class Settings:
    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Outbound requests
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36")
    FETCH_TIMEOUT_MS: int = int(os.getenv("FETCH_TIMEOUT_MS", "30000"))
    CHECK_TIMEOUT_MS: int = int(os.getenv("CHECK_TIMEOUT_MS", "15000"))

    # Pause between consecutive requests of a batch
    BATCH_DELAY_MS: int = int(os.getenv("BATCH_DELAY_MS", "1000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
