"""
User configuration storage for fasttag.

Settings live in ``config.json`` inside the fasttag configuration directory.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from .config import OUTPUT_FORMATS, FastTagConfig

logger = logging.getLogger(__name__)


def get_fasttag_config_dir(create: bool = True) -> Path:
    """
    Get the fasttag configuration directory.

    Checks in order:
    1. FASTTAG_CONFIG_DIR environment variable
    2. XDG_DATA_HOME environment variable (if set)
    3. ~/.fasttag/ (default)

    Args:
        create: If True, create the directory if it doesn't exist.

    Returns:
        Path to the fasttag config directory
    """
    if "FASTTAG_CONFIG_DIR" in os.environ:
        base = Path(os.environ["FASTTAG_CONFIG_DIR"])
    elif "XDG_DATA_HOME" in os.environ:
        base = Path(os.environ["XDG_DATA_HOME"]) / "fasttag"
    else:
        base = Path.home() / ".fasttag"

    if create:
        try:
            base.mkdir(parents=True, exist_ok=True)
        except (OSError, PermissionError):
            # Caller gets the error when it writes
            pass
    return base


def get_config_file(create_dir: bool = True) -> Path:
    """Get the path to the fasttag configuration file."""
    return get_fasttag_config_dir(create=create_dir) / "config.json"


def read_config() -> dict:
    """
    Read the fasttag configuration file.

    Returns:
        Dictionary with configuration values (empty dict if the file doesn't exist)
    """
    config_file = get_config_file(create_dir=False)
    if not config_file.exists():
        return {}
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", config_file, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a JSON object", config_file)
        return {}
    return data


def write_config(config: dict) -> None:
    """
    Write configuration to the fasttag config file.

    Existing settings that are not in ``config`` are preserved.
    """
    config_file = get_config_file()
    existing_config = read_config()
    existing_config.update(config)

    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(existing_config, f, indent=2, ensure_ascii=False)


def load_config() -> FastTagConfig:
    """Build a FastTagConfig from the stored settings."""
    return FastTagConfig.from_dict(read_config())


def get_default_lexicon() -> Optional[str]:
    """
    Get the default lexicon source.

    The FASTTAG_LEXICON environment variable wins over the config file.
    """
    env_value = os.environ.get("FASTTAG_LEXICON")
    if env_value:
        return env_value
    return read_config().get("lexicon")


def set_default_lexicon(source: str) -> None:
    """Store the default lexicon path or URL."""
    if "://" not in source:
        source = str(Path(source).expanduser().resolve())
    write_config({"lexicon": source})


def set_default_output_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format '{output_format}'. Choose from: {', '.join(OUTPUT_FORMATS)}"
        )
    write_config({"output_format": output_format})
