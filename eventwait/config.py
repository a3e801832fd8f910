import os

import toml
import yaml

from eventwait.errors import ConfigurationError

DEFAULT_CONFIG_PATH = "./config.toml"
ENV_CONFIG_DIR_VAR = "EVENTWAIT_CONFIG_DIR"


def load_config(cli_config_path=None):
    """
    Load configuration from a TOML file.

    Precedence:
      1. cli_config_path if provided (must exist).
      2. Environment variable EVENTWAIT_CONFIG_DIR (looking for config.toml).
      3. Default to ./config.toml.

    A missing file in cases 2 and 3 yields an empty configuration.

    Returns:
        dict: The configuration settings.

    Raises:
        ConfigurationError: If the file is missing (case 1) or is not valid TOML.
    """
    if cli_config_path:
        config_path = cli_config_path
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")
    elif os.environ.get(ENV_CONFIG_DIR_VAR):
        config_path = os.path.join(os.environ[ENV_CONFIG_DIR_VAR], "config.toml")
    else:
        config_path = DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        return {}

    try:
        with open(config_path, "r") as f:
            config_data = toml.load(f)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigurationError(f"Error loading configuration {config_path}: {e}") from e

    config_data["__config_path__"] = config_path
    return config_data


def watch_settings(cfg):
    """
    Return the [watch] table with defaults filled in.

    Returns:
        dict: Keys 'events' (list), 'recursive' (bool) and 'monitor' (bool).
    """
    section = cfg.get("watch", {}) or {}
    events = section.get("events", [])
    if isinstance(events, str):
        events = [events]
    if not isinstance(events, list):
        raise ConfigurationError("watch.events must be a list of event names")
    settings = {"events": [str(e) for e in events]}
    for key in ("recursive", "monitor"):
        value = section.get(key, False)
        if not isinstance(value, bool):
            raise ConfigurationError(f"watch.{key} must be true or false, got {value!r}")
        settings[key] = value
    return settings


def _watch_items(data, source):
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("watch_items", [])
    if not isinstance(data, list):
        raise ConfigurationError(f"Watch list {source} must contain a list of paths")
    return [str(item) for item in data]


def load_watch_list(watch_list_path):
    """
    Load paths to watch from a YAML file.

    The file holds either a mapping with a 'watch_items' list or a bare list.

    Args:
        watch_list_path (str): Path to the YAML file.

    Returns:
        list: Paths in file order.
    """
    if not os.path.exists(watch_list_path):
        raise ConfigurationError(f"Watch list file not found: {watch_list_path}")
    try:
        with open(watch_list_path, "r") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Error loading watch list {watch_list_path}: {e}") from e
    return _watch_items(data, watch_list_path)


def load_watch_lists(path):
    """
    Load paths to watch from a YAML file or a directory containing YAML files.
    If a directory is provided, all .yaml/.yml files are loaded in name order
    and their paths concatenated.

    Args:
        path (str): Path to a YAML file or directory.

    Returns:
        list: Aggregated paths.
    """
    if os.path.isdir(path):
        aggregated = []
        for filename in sorted(os.listdir(path)):
            if filename.endswith((".yaml", ".yml")):
                aggregated.extend(load_watch_list(os.path.join(path, filename)))
        return aggregated
    else:
        return load_watch_list(path)
