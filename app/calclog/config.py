"""
Configuration Module

Loads settings from environment variables and .env file.
Everything here has a sensible default, so the calculator
runs without any configuration at all.
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Tuple
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / "config" / ".env"
load_dotenv(dotenv_path=ENV_PATH)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """
    Application configuration.

    All settings are loaded from environment variables.
    See .env.example for available options.
    """

    # === Log File Settings ===
    default_directory: str = "./log"   # Used when no path argument is given
    log_prefix: str = "log"            # Log files are named <prefix><timestamp>

    # === Display Settings ===
    decimals: int = 2                  # Rounding for displayed results
    affirmative: Tuple[str, ...] = ("s", "si", "y", "yes")
    pause_enabled: bool = True         # Wait for Enter before the menu
    clear_enabled: bool = True         # Clear the terminal before the menu

    # === Diagnostics Settings ===
    log_level: str = "WARNING"
    diagnostics_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from environment variables.

        This is the main way to create a Config object.
        Environment variables override defaults.
        """
        def get_bool(key: str, default: bool) -> bool:
            """Helper to parse boolean env vars."""
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes")

        def get_int(key: str, default: int) -> int:
            """Helper to parse int env vars."""
            try:
                return int(os.getenv(key, default))
            except ValueError:
                return default

        def get_list(key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
            """Helper to parse comma separated env vars."""
            value = os.getenv(key)
            if value is None:
                return default
            return tuple(item.strip().lower() for item in value.split(",") if item.strip())

        return cls(
            # Log files
            default_directory=os.getenv("CALCLOG_DEFAULT_DIR", "./log"),
            log_prefix=os.getenv("CALCLOG_LOG_PREFIX", "log"),

            # Display
            decimals=get_int("CALCLOG_DECIMALS", 2),
            affirmative=get_list("CALCLOG_AFFIRMATIVE", ("s", "si", "y", "yes")),
            pause_enabled=get_bool("CALCLOG_PAUSE", True),
            clear_enabled=get_bool("CALCLOG_CLEAR", True),

            # Diagnostics
            log_level=os.getenv("CALCLOG_LOG_LEVEL", "WARNING").upper(),
            diagnostics_file=os.getenv("CALCLOG_DIAGNOSTICS_FILE") or None,
            json_logs=get_bool("CALCLOG_JSON_LOGS", False),
        )

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.default_directory:
            errors.append("CALCLOG_DEFAULT_DIR must not be empty")

        if not self.log_prefix:
            errors.append("CALCLOG_LOG_PREFIX must not be empty")

        if self.decimals < 0:
            errors.append("CALCLOG_DECIMALS must be zero or positive")

        if not self.affirmative:
            errors.append("CALCLOG_AFFIRMATIVE needs at least one answer")

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(f"CALCLOG_LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}")

        return errors

    def __post_init__(self):
        """Validate after initialization."""
        errors = self.validate()
        if errors:
            raise ValueError(f"Configuration errors: {errors}")


# === Convenience function ===

def load_config() -> Config:
    """
    Load configuration from environment.

    Usage:
        from calclog.config import load_config
        config = load_config()
    """
    return Config.from_env()


# === For testing/debugging ===

if __name__ == "__main__":
    # Run this file directly to see current config
    config = load_config()
    print("Current Configuration:")
    print(f"  Default Directory: {config.default_directory}")
    print(f"  Log Prefix: {config.log_prefix}")
    print(f"  Decimals: {config.decimals}")
    print(f"  Affirmative Answers: {', '.join(config.affirmative)}")
    print(f"  Log Level: {config.log_level}")
