"""
Runtime Configuration Store.

Settings for the command-line tools. They are read from
``[tool.typed_collection]`` in the nearest ``pyproject.toml``; explicit
arguments override them.

.. code-block:: toml

    [tool.typed_collection]
    types = ["integer", "myapp.models.Animal", "myapp.models.Dog"]
    log_level = "debug"
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

DEFAULT_TYPES = ["integer", "string", "float", "collections.abc.Sized"]
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class RuntimeConfig(BaseModel):
  """
  Configuration container for the CLI.
  """

  types: List[str] = Field(
    default_factory=lambda: list(DEFAULT_TYPES),
    description="Declared element types compared by the 'matrix' command.",
  )
  log_level: str = Field("INFO", description="Root logger level.")

  @field_validator("log_level")
  @classmethod
  def validate_log_level(cls, v: str) -> str:
    """
    Normalises the level name to upper case.

    Raises:
        ValueError: If the level is not one of DEBUG, INFO, WARNING, ERROR.
    """
    v_clean = v.strip().upper()
    if v_clean not in LOG_LEVELS:
      raise ValueError(f"Unknown log level: '{v}'. Supported levels: {list(LOG_LEVELS)}")
    return v_clean

  @field_validator("types")
  @classmethod
  def validate_types(cls, v: List[str]) -> List[str]:
    cleaned = [t.strip() for t in v if t.strip()]
    if not cleaned:
      raise ValueError("At least one type is required.")
    return cleaned

  def apply_log_level(self) -> None:
    """Pushes `log_level` to the root logger via the console utilities."""
    from typed_collection.utils.console import set_log_level

    set_log_level(self.log_level)

  @classmethod
  def load(
    cls,
    types: Optional[List[str]] = None,
    log_level: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        types (Optional[List[str]]): Override for the matrix types.
        log_level (Optional[str]): Override for the log level.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The resolved configuration.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    values: Dict[str, Any] = {}
    final_types = types or toml_config.get("types")
    if final_types:
      values["types"] = final_types

    final_level = log_level or toml_config.get("log_level")
    if final_level:
      values["log_level"] = final_level

    return cls(**values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.typed_collection]`` table and the
      directory it was found in. Empty when no file exists or it cannot be parsed.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None
      return data.get("tool", {}).get("typed_collection", {}), parent

  return {}, None
