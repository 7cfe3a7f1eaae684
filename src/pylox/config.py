"""
pylox Configuration
===================

Settings for the ``loxscan`` command. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line flags (applied last by the CLI)

Environment variables (all optional):
    PYLOX_TOKEN_FORMAT: "display" or "repr"
    PYLOX_KEEP_GOING: exit 0 even when errors were reported (1/true/yes/on)
    PYLOX_VERBOSE: debug logging and a summary line (1/true/yes/on)
    PYLOX_PROMPT: prompt string for interactive mode
"""

import logging
import os
from dataclasses import dataclass

TOKEN_FORMATS = ("display", "repr")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: str):
    """Return True/False for a recognized flag value, else None."""
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


@dataclass
class ScanConfig:
    """
    Configuration for a ``loxscan`` run.

    Attributes:
        token_format: How tokens are printed: "display" (TYPE lexeme
            literal) or "repr" (debugging form)
        keep_going: Exit with success even if lexical errors were reported
        verbose: Enable debug logging and print a summary after each scan
        prompt: Prompt shown in interactive mode
    """
    token_format: str = "display"
    keep_going: bool = False
    verbose: bool = False
    prompt: str = "> "

    @classmethod
    def from_env(cls) -> "ScanConfig":
        """
        Create a ScanConfig from environment variables.

        Unrecognized values are ignored and the default is kept.
        """
        config = cls()

        if token_format := os.environ.get("PYLOX_TOKEN_FORMAT"):
            if token_format in TOKEN_FORMATS:
                config.token_format = token_format

        if keep_going := os.environ.get("PYLOX_KEEP_GOING"):
            parsed = _parse_bool(keep_going)
            if parsed is not None:
                config.keep_going = parsed

        if verbose := os.environ.get("PYLOX_VERBOSE"):
            parsed = _parse_bool(verbose)
            if parsed is not None:
                config.verbose = parsed

        if (prompt := os.environ.get("PYLOX_PROMPT")) is not None:
            config.prompt = prompt

        return config

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )
