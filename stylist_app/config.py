"""Configuration helpers for the outfit recommendation engine."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_MAX_CANDIDATES = 5
DEFAULT_TOP_N = 3
MAX_TOP_N = 3
DEFAULT_OPTIONAL_INCLUSION_PROBABILITY = 0.5

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class EngineConfig:
    """Tunable values for the recommendation pipeline.

    The defaults reproduce the stock behaviour: five independently built
    candidates per call, each optional category included with probability
    one half, and the best three surfaced. Candidates missing a required
    category are penalized rather than filtered unless
    ``strict_required_categories`` is switched on.
    """

    max_candidates: int = DEFAULT_MAX_CANDIDATES
    top_n: int = DEFAULT_TOP_N
    optional_inclusion_probability: float = DEFAULT_OPTIONAL_INCLUSION_PROBABILITY
    strict_required_categories: bool = False
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    environment: str | None = None

    def __post_init__(self) -> None:
        if self.max_candidates < 0:
            raise ValueError("max_candidates cannot be negative")
        if not 0 <= self.top_n <= MAX_TOP_N:
            raise ValueError(f"top_n must be between 0 and {MAX_TOP_N}")
        if not 0.0 <= self.optional_inclusion_probability <= 1.0:
            raise ValueError("optional_inclusion_probability must be between 0 and 1")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default. Environment variables (upper-cased keys) take precedence over
        file values.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("ENGINE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        max_candidates = get_value("max_candidates")
        top_n = get_value("top_n")
        probability = get_value("optional_inclusion_probability")
        strict = get_value("strict_required_categories", "false")
        seed = get_value("random_seed")
        log_level = get_value("log_level", "INFO")

        return cls(
            max_candidates=int(max_candidates) if max_candidates else DEFAULT_MAX_CANDIDATES,
            top_n=int(top_n) if top_n else DEFAULT_TOP_N,
            optional_inclusion_probability=(
                float(probability) if probability else DEFAULT_OPTIONAL_INCLUSION_PROBABILITY
            ),
            strict_required_categories=str(strict).strip().lower() in _TRUE_VALUES,
            random_seed=int(seed) if seed else None,
            log_level=str(log_level or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
