"""Runtime configuration for WordLens.

Defaults cover the common case; a JSON file (passed explicitly or named by
the WORDLENS_CONFIG environment variable) may override any field.
"""
import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from wordlens.errors import ConfigError

CONFIG_ENV_VAR = "WORDLENS_CONFIG"

SortColumn = Literal["index", "word", "lexeme", "count", "rank", "frequency"]


class WordLensConfig(BaseModel):
    class_prefix: str = Field(default="wdautohl", min_length=1, description="Leading token of highlight class names")
    pdf_max_workers: int = Field(default=4, ge=1)
    pdf_page_separator: str = " "
    default_sort: SortColumn = "count"
    default_descending: bool = True


def load_config(path: Optional[Path] = None) -> WordLensConfig:
    """Load configuration from *path*, WORDLENS_CONFIG, or defaults. Raises ConfigError on failure."""
    if path is None:
        env_val = os.environ.get(CONFIG_ENV_VAR)
        if not env_val:
            return WordLensConfig()
        path = Path(env_val).expanduser()
    try:
        return WordLensConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        field_errors = "; ".join(
            f"{' -> '.join(str(x) for x in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(path, f"Schema validation failed: {field_errors}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(path, str(e)) from e
