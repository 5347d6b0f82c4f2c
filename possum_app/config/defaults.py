"""Default configuration parameters for the possum state tracker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentParams:
    """Service-binding lookup parameters."""
    db_service_name: str = "possum-db"       # Binding holding DB credentials
    passel_service_name: str = "possum"      # Binding holding passel + basic auth
    passel_key: str = "passel"               # Credential key of the member list


@dataclass(frozen=True)
class StoreParams:
    """State table access parameters."""
    placeholder: str = "?"                   # DB-API paramstyle marker ("?" or "%s")
    strict_writes: bool = True               # Zero-row updates raise NotFound


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class PossumConfig:
    """Complete configuration."""
    environment: EnvironmentParams
    store: StoreParams
    logging: LoggingParams


def get_default_config() -> PossumConfig:
    """Get the default configuration instance."""
    return PossumConfig(
        environment=EnvironmentParams(),
        store=StoreParams(),
        logging=LoggingParams(),
    )
