"""Provider backed by an external AI command-line tool (codex, claude)."""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from lexica.constants.llm_config import CLI_PROVIDER_COMMANDS, CLI_TIMEOUT_SECONDS
from lexica.llm.base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class LLMCommandError(RuntimeError):
    """The external tool could not be run or exited with a non-zero status."""


class CLIToolProvider(LLMProvider):
    """Run ``<command> <base args> <extra args> <prompt>`` and return its stdout.

    Args:
        tool: Provider name, a key of ``CLI_PROVIDER_COMMANDS``.
        args: Extra arguments inserted before the prompt.
        timeout: Seconds to wait for the tool before giving up.
    """

    def __init__(
        self,
        tool: str,
        args: Sequence[str] = (),
        timeout: float = CLI_TIMEOUT_SECONDS,
    ):
        if tool not in CLI_PROVIDER_COMMANDS:
            raise ValueError(f"Unknown CLI tool: {tool}")
        self.tool = tool
        self.args = tuple(args)
        self.timeout = timeout

    def build_command(self, prompt: str) -> list[str]:
        return [*CLI_PROVIDER_COMMANDS[self.tool], *self.args, prompt]

    def complete(self, prompt: str, **kwargs) -> LLMResponse:
        command = self.build_command(prompt)
        logger.debug(f"Running {command[0]} ({self.tool})")
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=kwargs.get("timeout", self.timeout),
            )
        except FileNotFoundError as e:
            raise LLMCommandError(f"Command not found: {command[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise LLMCommandError(f"{command[0]} timed out after {e.timeout}s") from e

        if completed.returncode != 0:
            reason = (completed.stderr or "").strip()
            raise LLMCommandError(reason or f"Failed with exit code {completed.returncode}")

        return LLMResponse(content=completed.stdout or "", model=self.tool)

    def estimate_cost(self, input_tokens: int, output_tokens: int) -> float:
        # billed by the tool's own subscription
        return 0.0
