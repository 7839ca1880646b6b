import os
from dataclasses import dataclass, field
from typing import Optional


def _read_seed() -> Optional[int]:
    raw = os.environ.get("HASH_TABLE_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw, 0)
    except ValueError:
        raise ValueError(
            f"HASH_TABLE_SEED must be an integer: not {raw!r}"
        ) from None


@dataclass
class Settings:
    """Environment-driven configuration."""

    # seed for the tabulation tables, None means a fresh random layout per process
    SEED: Optional[int] = field(default_factory=_read_seed)

    DEBUG: bool = field(
        default_factory=lambda: os.environ.get("HASH_TABLE_DEBUG", "false").lower()
        == "true"
    )
    LOG_LEVEL: str = field(
        default_factory=lambda: os.environ.get(
            "HASH_TABLE_LOG_LEVEL", "WARNING"
        ).upper()
    )


settings = Settings()
