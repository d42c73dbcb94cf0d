"""Application settings."""

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from ..models.task import DEFAULT_LIST_IDS, ID_SPACE


class Settings(BaseSettings):
    """Application settings."""

    items_per_list: int = Field(
        default=10,
        ge=0,
        description="Number of generated tasks seeded into each list",
    )

    seed: int | None = Field(
        default=None,
        description="Random seed for generated tasks (None for a fresh board each run)",
    )

    list_ids: tuple[str, ...] = Field(
        default=DEFAULT_LIST_IDS,
        min_length=1,
        description="Board lists in display order",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKFLOW_",
    }

    @model_validator(mode="after")
    def validate_board_size(self) -> "Settings":
        """Generated ids must stay unique, so the whole board must fit in ID_SPACE."""
        total = self.items_per_list * len(self.list_ids)
        if total > ID_SPACE:
            raise ValueError(
                f"items_per_list={self.items_per_list} across {len(self.list_ids)} lists "
                f"needs {total} tasks (limit {ID_SPACE})"
            )
        return self
