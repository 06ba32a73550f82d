"""Tests for engine configuration loading and structured logging helpers."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest
from pydantic import BaseModel, ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))

from stylist_app.config import EngineConfig
from stylist_app.logging_config import (
    CORRELATION_ID,
    JsonFormatter,
    operation_context,
    scrub_fields,
)
from tools.observability import instrument_operation

_CONFIG_KEYS = (
    "APP_ENV",
    "APP_CONFIG_PATH",
    "MAX_CANDIDATES",
    "TOP_N",
    "OPTIONAL_INCLUSION_PROBABILITY",
    "STRICT_REQUIRED_CATEGORIES",
    "RANDOM_SEED",
    "LOG_LEVEL",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in _CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults_without_environment(clean_env: pytest.MonkeyPatch) -> None:
    config = EngineConfig.from_env()
    assert config.max_candidates == 5
    assert config.top_n == 3
    assert config.optional_inclusion_probability == 0.5
    assert config.strict_required_categories is False
    assert config.random_seed is None


def test_environment_file_and_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_file = tmp_path / "staging.yaml"
    config_file.write_text(
        "# engine settings\n"
        "top_n: 2\n"
        "optional_inclusion_probability: '0.6'\n"
        "strict_required_categories: yes\n"
        "random_seed: 99\n"
    )
    clean_env.setenv("APP_CONFIG_PATH", str(config_file))
    clean_env.setenv("TOP_N", "1")

    config = EngineConfig.from_env()
    assert config.top_n == 1
    assert config.optional_inclusion_probability == 0.6
    assert config.strict_required_categories is True
    assert config.random_seed == 99


def test_invalid_probability_rejected() -> None:
    with pytest.raises(ValueError):
        EngineConfig(optional_inclusion_probability=1.5)
    with pytest.raises(ValueError):
        EngineConfig(top_n=-1)
    with pytest.raises(ValueError):
        EngineConfig(top_n=4)


def test_top_n_above_three_is_rejected_from_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TOP_N", "5")
    with pytest.raises(ValueError):
        EngineConfig.from_env()


def test_taste_profile_fields_are_withheld() -> None:
    payload = {
        "preferred_styles": ["classic", "boho"],
        "favorite_colors": [],
        "color_preference": "navy",
        "preferences": {"eventType": "Work", "colorPreference": "red"},
        "item_count": 4,
        "names": ["Navy Blazer"],
    }
    scrubbed = scrub_fields(payload)
    assert scrubbed["preferred_styles"] == "<withheld: n=2>"
    assert scrubbed["favorite_colors"] == []
    assert scrubbed["color_preference"] == "<withheld>"
    assert scrubbed["preferences"] == {"eventType": "Work", "colorPreference": "<withheld>"}
    assert scrubbed["item_count"] == 4
    assert scrubbed["names"] == ["Navy Blazer"]
    assert scrub_fields(scrubbed) == scrubbed
    assert payload["color_preference"] == "navy"


def test_json_formatter_includes_correlation_id() -> None:
    record = logging.LogRecord("engine", logging.INFO, __file__, 1, "scored %s", ("outfit",), None)
    record.candidate_count = 4
    record.favorite_colors = ["navy"]
    with operation_context("scoring", correlation_id="corr-123"):
        payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "scored outfit"
    assert payload["correlation_id"] == "corr-123"
    assert payload["candidate_count"] == 4
    assert payload["favorite_colors"] == "<withheld: n=1>"
    assert CORRELATION_ID.get() != "corr-123"


class _Payload(BaseModel):
    count: int


def test_instrument_operation_validates_and_passes_through() -> None:
    @instrument_operation("double", input_model=_Payload)
    def double(count: int) -> int:
        return count * 2

    assert double(count="4") == 8
    with pytest.raises(ValidationError):
        double(count="many")

    @instrument_operation("lenient", input_model=_Payload, on_validation_error=lambda exc: {"errors": exc.error_count()})
    def lenient(count: int) -> int:
        return count

    assert lenient(count="many") == {"errors": 1}


def test_instrument_operation_reraises_failures() -> None:
    @instrument_operation("boom")
    def boom() -> None:
        raise RuntimeError("broken")

    with pytest.raises(RuntimeError):
        boom()
