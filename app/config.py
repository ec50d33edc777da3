from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    google_places_api_key: str
    database_url: str = "postgresql://localhost:5432/hotels"
    max_api_calls: int = 5000
    max_candidates: int = 10
    search_country: str = "France"
    export_dir: str = "."
    browser_headless: bool = True
    scrape_timeout_ms: int = 30000
    scrape_concurrency: int = 10
    log_level: str = "INFO"
