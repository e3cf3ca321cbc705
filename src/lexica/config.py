"""CLI configuration: the ``config.json`` file and ``.env`` loading.

Config file format::

    {"ai": {"provider": "codex", "model": null, "args": []}}

``provider`` is one of the external CLI tools (``codex``, ``claude-code``) or
an SDK provider (``openai``, ``anthropic``, ``gemini``). ``args`` are extra
arguments passed to a CLI tool before the prompt. ``model`` only applies to
SDK providers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from lexica.constants import ENCODING_UTF8
from lexica.constants.llm_config import ALL_PROVIDERS, DEFAULT_PROVIDER
from lexica.core.result import Result, fail_file_io, fail_invalid_input, succeed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AIConfig:
    provider: str = DEFAULT_PROVIDER
    model: str | None = None
    args: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"provider": self.provider, "model": self.model, "args": list(self.args)}


@dataclass(frozen=True)
class LexicaConfig:
    ai: AIConfig = field(default_factory=AIConfig)

    def to_dict(self) -> dict[str, Any]:
        return {"ai": self.ai.to_dict()}


def default_config_dict() -> dict[str, Any]:
    """Content written by ``lexica init``."""
    return {"ai": {"provider": DEFAULT_PROVIDER, "args": []}}


def load_env(dotenv_path: Path | None = None) -> bool:
    """Load API keys from ``.env`` without overriding the real environment."""
    return load_dotenv(dotenv_path=dotenv_path, override=False)


def parse_config(data: Any) -> Result[LexicaConfig]:
    """Validate decoded config JSON."""
    if not isinstance(data, dict) or not isinstance(data.get("ai"), dict):
        return fail_invalid_input("Invalid config format")
    ai = data["ai"]

    provider = ai.get("provider")
    if provider not in ALL_PROVIDERS:
        return fail_invalid_input("Invalid config format")

    model = ai.get("model")
    if model is not None and (not isinstance(model, str) or not model.strip()):
        return fail_invalid_input("Invalid config format")

    args = ai.get("args")
    if args is None:
        args = []
    if not isinstance(args, list) or not all(isinstance(arg, str) for arg in args):
        return fail_invalid_input("Invalid config format")

    return succeed(
        LexicaConfig(
            ai=AIConfig(
                provider=provider,
                model=model.strip() if model else None,
                args=tuple(args),
            )
        )
    )


def read_config(path: Path) -> Result[LexicaConfig]:
    """Read and validate the config file.

    Returns:
        ``file-io`` if the file is missing, unreadable or not JSON;
        ``invalid-input`` if it does not match the config format.
    """
    path = Path(path)
    if not path.exists():
        return fail_file_io("Config file not found")
    try:
        content = json.loads(path.read_text(encoding=ENCODING_UTF8))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read config {path}: {e}")
        return fail_file_io(str(e) or "Failed to read config")
    return parse_config(content)
