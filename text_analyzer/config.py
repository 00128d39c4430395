import copy
import json

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG = {
    "SentimentAnalyzer": {"label_threshold": 0.2, "confidence_per_word": 5},
    "KeywordAnalyzer": {"top_n_keywords_count": 10, "min_word_length": 4},
    "SummaryAnalyzer": {"max_summary_sentences": 3, "keyword_pool_size": 10},
    "ReadabilityAnalyzer": {},
    "History": {"path": "history.json", "max_items": 10},
    "Global": {
        "request_timeout": 10,
        "http_retries_total": 2,
        "http_backoff_factor": 0.2,
        "user_agent": "Mozilla/5.0 (compatible; TextAnalyzer/1.0)",
        "debug": False,
    },
}


def default_config() -> dict:
    return copy.deepcopy(DEFAULT_CONFIG)


def merge_config(base: dict, overrides: dict) -> dict:
    """Merge *overrides* into a copy of *base*, one level deep for dict sections."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path=None) -> dict:
    """Return the default config, overridden by the JSON file at *path* if it can be read."""
    config = default_config()
    if not path:
        return config
    try:
        with open(path, 'r', encoding='utf-8') as f:
            custom_config = json.load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found. Using default settings.", path)
        return config
    except json.JSONDecodeError:
        logger.warning("Error decoding JSON from %s. Using default settings.", path)
        return config
    if not isinstance(custom_config, dict):
        logger.warning("Config file %s does not contain a JSON object. Using default settings.", path)
        return config
    logger.info("Loaded custom configuration from %s", path)
    return merge_config(config, custom_config)


def module_config(config: dict, module_name: str) -> dict:
    """Section for *module_name* with the Global section passed down."""
    section = dict(config.get(module_name, {}))
    section["Global"] = config.get("Global", {})
    return section
