from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, Optional
import os

import yaml

from .errors import ConfigError

DEFAULT_MEMORY_LENGTH = 30000
DEFAULT_STEP_LIMIT = 5000
EOF_BEHAVIOURS = ("unchanged", "zero", "max")


def check_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return value


@dataclass
class InterpreterConfig:
    """Settings shared by the interpreter, the runner and the debugger.

    memory_length is the nominal tape length. The tape is unbounded; leaving
    [0, memory_length) is only reported in the log.
    """
    memory_length: int = DEFAULT_MEMORY_LENGTH
    step_limit: int = DEFAULT_STEP_LIMIT
    eof_behaviour: str = "unchanged"
    show_memory_range: int = 10

    def __post_init__(self):
        for name in ("memory_length", "step_limit", "show_memory_range"):
            check_positive_int(name, getattr(self, name))
        if self.eof_behaviour not in EOF_BEHAVIOURS:
            raise ConfigError(
                f"eof_behaviour must be one of {', '.join(EOF_BEHAVIOURS)}, got {self.eof_behaviour!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InterpreterConfig':
        bad_keys = [k for k in data if not isinstance(k, str)]
        if bad_keys:
            raise ConfigError(f"Config keys must be strings, got {', '.join(map(repr, bad_keys))}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> 'InterpreterConfig':
        """Build a config from BF_STEP_LIMIT, BF_MEMORY_LENGTH and BF_EOF_BEHAVIOUR."""
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        try:
            if "BF_STEP_LIMIT" in env:
                values["step_limit"] = int(env["BF_STEP_LIMIT"])
            if "BF_MEMORY_LENGTH" in env:
                values["memory_length"] = int(env["BF_MEMORY_LENGTH"])
        except ValueError as e:
            raise ConfigError(f"Invalid integer in environment: {e}") from e
        if "BF_EOF_BEHAVIOUR" in env:
            values["eof_behaviour"] = env["BF_EOF_BEHAVIOUR"]
        return cls(**values)


def load_config(path: str) -> InterpreterConfig:
    """Load an InterpreterConfig from a YAML file.

    Supported formats:
      1) A flat mapping: { step_limit: 100, eof_behaviour: zero }
      2) The same mapping nested under an 'interpreter' key
    An empty file yields the defaults.
    """
    with open(path, "r") as f:
        text = f.read()

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e

    if data is None:
        return InterpreterConfig()
    if not isinstance(data, dict):
        raise ConfigError("Unsupported config structure; expected a mapping")
    if "interpreter" in data:
        data = data["interpreter"] or {}
        if not isinstance(data, dict):
            raise ConfigError("'interpreter' section must be a mapping")
    return InterpreterConfig.from_dict(data)
