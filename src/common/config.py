"""Shared configuration utilities."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar, Callable, Generic

import yaml

T = TypeVar('T')


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "prod",
    env_var: str | None = None,
) -> Path:
    """Find config file path, checking env var and defaults.

    Args:
        config_name: Name of config (without .yaml) or None for default
        config_dir: Directory containing config files
        default_name: Default config name if config_name is None
        env_var: Environment variable to check for config name

    Returns:
        Path to the config file

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    config_path = config_dir / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict. An empty file yields an empty dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


class ConfigSingleton(Generic[T]):
    """Lazily loaded process-wide config holder.

    Example:
        >>> _manager = ConfigSingleton(load_config)
        >>> get_config = _manager.get
        >>> set_config = _manager.set
        >>> reset_config = _manager.reset
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        """Get the config, loading it lazily if needed."""
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        """Set the config directly."""
        self._config = config

    def reset(self) -> None:
        """Reset the config, forcing reload on next get()."""
        self._config = None


CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"

DEFAULT_TAG_DENYLIST = [
    "scp",
    "safe",
    "euclid",
    "keter",
    "thaumiel",
    "neutralized",
    "explained",
    "esoteric-class",
    "featured",
    "joke",
    "tale",
    "hub",
    "_cc",
    "_licensebox",
]


@dataclass
class WikiConfig:
    base_url: str = "http://scp-wiki.wikidot.com"
    series_pages: int = 5
    request_timeout: int = 30
    user_agent: str = "scp-suggest/1.0 (vote scraper)"


@dataclass
class ScrapeConfig:
    first_article: int = 2
    max_article: int = 5000
    collect_tags: bool = False
    tag_denylist: list[str] = field(default_factory=lambda: list(DEFAULT_TAG_DENYLIST))
    output_path: str = "data/articles.json"


@dataclass
class SuggestConfig:
    limit: int = 20
    attribute: str = "votes"  # "votes" or "tags"
    score_scale: int | None = None  # None writes floats
    exclude_incomparable: bool = False
    input_path: str = "data/articles.json"
    output_path: str = "data/suggestions.json"


@dataclass
class Config:
    wiki: WikiConfig = field(default_factory=WikiConfig)
    scrape: ScrapeConfig = field(default_factory=ScrapeConfig)
    suggest: SuggestConfig = field(default_factory=SuggestConfig)


def load_config(config_name: str | None = None) -> Config:
    """Load configuration from a YAML file in configs/.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses CONFIG_ENV env var or "prod".

    Returns:
        Loaded Config object
    """
    config_path = find_config_path(config_name, CONFIG_DIR, env_var="CONFIG_ENV")
    return parse_config(load_yaml(config_path))


def parse_config(data: dict) -> Config:
    """Parse config dictionary into Config object, falling back to defaults."""
    wiki_data = data.get("wiki", {}) or {}
    scrape_data = data.get("scrape", {}) or {}
    suggest_data = data.get("suggest", {}) or {}

    defaults = Config()

    wiki = WikiConfig(
        base_url=wiki_data.get("base_url", defaults.wiki.base_url).rstrip("/"),
        series_pages=wiki_data.get("series_pages", defaults.wiki.series_pages),
        request_timeout=wiki_data.get("request_timeout", defaults.wiki.request_timeout),
        user_agent=wiki_data.get("user_agent", defaults.wiki.user_agent),
    )

    scrape = ScrapeConfig(
        first_article=scrape_data.get("first_article", defaults.scrape.first_article),
        max_article=scrape_data.get("max_article", defaults.scrape.max_article),
        collect_tags=scrape_data.get("collect_tags", defaults.scrape.collect_tags),
        tag_denylist=list(scrape_data.get("tag_denylist", defaults.scrape.tag_denylist)),
        output_path=scrape_data.get("output_path", defaults.scrape.output_path),
    )

    attribute = suggest_data.get("attribute", defaults.suggest.attribute)
    if attribute not in ("votes", "tags"):
        raise ValueError(f"suggest.attribute must be 'votes' or 'tags', got {attribute!r}")

    suggest = SuggestConfig(
        limit=suggest_data.get("limit", defaults.suggest.limit),
        attribute=attribute,
        score_scale=suggest_data.get("score_scale", defaults.suggest.score_scale),
        exclude_incomparable=suggest_data.get(
            "exclude_incomparable", defaults.suggest.exclude_incomparable
        ),
        input_path=suggest_data.get("input_path", defaults.suggest.input_path),
        output_path=suggest_data.get("output_path", defaults.suggest.output_path),
    )

    return Config(wiki=wiki, scrape=scrape, suggest=suggest)


# Global config instance (loaded on first access)
_manager: ConfigSingleton[Config] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
