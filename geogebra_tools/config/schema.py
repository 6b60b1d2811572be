from dataclasses import dataclass, field


@dataclass(frozen=True)
class EngineConfig:
    backend: str = "http"  # "http" or "mock"
    base_url: str = "http://localhost:8765"
    timeout_seconds: float = 10.0


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    file: str = "logs/geogebra_tools.log"
    max_bytes: int = 5_242_880
    backup_count: int = 3


@dataclass(frozen=True)
class AppConfig:
    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
