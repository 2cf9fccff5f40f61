from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    http_host: str = "127.0.0.1"
    http_port: int = 8000

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "originality"
    db_username: str = "originality"
    db_password: str = "secret"

    storage_root: str = "/app/files"
    storage_public_base_url: str = "http://127.0.0.1:8000"
    storage_signing_key: str = "change-me"
    storage_signed_url_ttl_seconds: int = 7 * 24 * 60 * 60

    pdf_engine: str = "pdfplumber"
    extraction_max_chars: int = 200_000

    tfidf_top_terms: int = 800

    # Heuristic AI detector; empirically chosen, not calibrated.
    ai_min_text_length: int = 50
    ai_marker_points: int = 6
    ai_marker_cap: int = 70
    ai_min_sentences: int = 5
    ai_cv_strong_threshold: float = 0.38
    ai_cv_strong_points: int = 40
    ai_cv_weak_threshold: float = 0.48
    ai_cv_weak_points: int = 25
    ai_min_words: int = 50
    ai_ttr_strong_threshold: float = 0.30
    ai_ttr_strong_points: int = 40
    ai_ttr_weak_threshold: float = 0.40
    ai_ttr_weak_points: int = 25
    ai_ttr_weak_max_words: int = 800
    ai_human_below: int = 25
    ai_generated_above: int = 65

    web_search_provider: str = "duckduckgo"
    web_min_text_length: int = 100
    web_query_max_chars: int = 150
    web_search_limit: int = 5
    web_search_delay_seconds: float = 0.5
    web_max_pages: int = 5
    web_fetch_timeout_seconds: float = 5.0
    web_page_max_chars: int = 10_000
    web_page_min_chars: int = 200
    web_source_threshold: float = 0.2
    web_max_sources: int = 5
    web_full_overlap_score: float = 0.9

    jplag_enabled: bool = True
    jplag_docker_binary: str = "docker"
    jplag_docker_image: str = "ghcr.io/edulinq/jplag-docker:latest"
    jplag_threads: int = 4
    jplag_default_language: str = "python3"
    jplag_timeout_seconds: float = 300.0
    jplag_csv_filename: str = "results.csv"

    similarity_default_threshold: float = 0.6
    similarity_default_top: int = 20
    similarity_max_top: int = 200
