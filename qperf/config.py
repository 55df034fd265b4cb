"""Report configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import ReportConfig, ReportOptions
from .utils import load_json, validate_model

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'qperf_config.json'


@lru_cache(maxsize=1)
def get_config() -> ReportConfig:
    """
    Load report defaults from data/qperf_config.json.

    Configuration is cached after first load. A missing file yields the
    built-in defaults.

    Returns:
        ReportConfig object with validated settings

    Raises:
        ValueError: If config file has invalid structure

    Example:
        from qperf.config import get_config
        config = get_config()
        print(f"Default delimiter: {config.delimiter}")
    """
    if not CONFIG_PATH.exists():
        return ReportConfig()
    return load_json(CONFIG_PATH, schema=ReportConfig)


def get_delimiter() -> str:
    """Get the default field delimiter."""
    return get_config().delimiter


def get_missing_round_type() -> str:
    """Get the question type used for rounds without a question set."""
    return get_config().missing_round_type


def get_log_dir() -> Path:
    """Get the directory for log files."""
    return Path(get_config().log_dir)


def build_options(**overrides) -> ReportOptions:
    """
    Build run options from config defaults plus caller overrides.

    Overrides set to None are ignored, so argparse namespaces can be
    passed through directly.

    Raises:
        ValueError: If the resulting options are invalid
    """
    values = get_config().model_dump(exclude={'log_dir'})
    values.update({k: v for k, v in overrides.items() if v is not None})
    return validate_model(ReportOptions, values, source='report options')


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
