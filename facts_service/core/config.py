from functools import lru_cache
from ipaddress import ip_address
from typing import Dict, Tuple
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from facts_service.core.exceptions import ConfigLoadError, InvalidAddressError


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    PROJECT_NAME: str = "Animal Facts Service"
    DEBUG: bool = False

    # Service configuration file
    FACTS_CONFIG_FILE: str = "config.json"

    # Logging settings
    LOG_LEVEL: str = "INFO"
    ENABLE_STRUCTURED_LOGGING: bool = True

    # Outbound request timeout in seconds
    HTTP_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


class FactsConfig(BaseModel):
    """Default animal selection and the animal to endpoint URL mapping."""
    default: str
    facts: Dict[str, str]


class ServerConfig(BaseModel):
    """API server configuration parameters."""
    address: str


class ConfigData(BaseModel):
    """Service configuration file structure."""
    server: ServerConfig
    animals: FactsConfig


def load_env_file(env_file: str = ".env") -> None:
    """
    Load environment variables from specified .env file.

    Args:
        env_file: Path to the .env file. Defaults to ".env".
    """
    env_path = os.path.join(os.getcwd(), env_file)
    if os.path.exists(env_path):
        load_dotenv(env_path)


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings with caching for efficiency.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


def load_config(path: str) -> ConfigData:
    """
    Load and validate the JSON service configuration file.

    Args:
        path: Path to the configuration file

    Returns:
        ConfigData: Parsed configuration

    Raises:
        ConfigLoadError: If the file cannot be read or does not match the schema
    """
    try:
        with open(path, "r", encoding="utf-8") as config_file:
            contents = config_file.read()
    except OSError as e:
        raise ConfigLoadError(
            f"failed to read configuration file {path}: {e}",
            context={"path": path}
        )

    try:
        return ConfigData.model_validate_json(contents)
    except ValidationError as e:
        raise ConfigLoadError(
            f"invalid configuration file {path}: {e}",
            context={"path": path, "errors": e.error_count()}
        )


def parse_bind_address(address: str) -> Tuple[str, int]:
    """
    Split a ``host:port`` listening address into its parts.

    The host must be an IP literal; IPv6 hosts are written in brackets,
    e.g. ``[::1]:8888``.

    Args:
        address: Address string from the server configuration

    Returns:
        Tuple[str, int]: Host and port

    Raises:
        InvalidAddressError: If the address is not a valid socket address
    """
    host, sep, port = address.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise InvalidAddressError(address)

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
        bracketed = True
    else:
        bracketed = False

    try:
        parsed = ip_address(host)
    except ValueError:
        raise InvalidAddressError(address)

    # IPv6 literals must be bracketed and IPv4 ones must not
    if (parsed.version == 6) != bracketed:
        raise InvalidAddressError(address)

    port_number = int(port)
    if port_number > 65535:
        raise InvalidAddressError(address)

    return host, port_number
