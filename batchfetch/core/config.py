import os

class Settings:
    # Batch
    BATCH_SIZE: int = int(os.getenv("BATCH_SIZE", "10"))
    URL_TEMPLATE: str = os.getenv("URL_TEMPLATE", "https://example.com/data/{index}")
    # "async" runs on one event loop, "threads" runs one OS thread per target
    FETCH_BACKEND: str = os.getenv("FETCH_BACKEND", "async").lower()

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

    # HTTP client
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")

settings = Settings()
