"""Request DTOs for API endpoints."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GameType(str, Enum):
    """Supported puzzle kinds. Each member has its own prompt template."""

    CROSSWORD = "crossword"
    WORDSEARCH = "wordsearch"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PuzzleRequest(BaseModel):
    """Request DTO for puzzle generation.

    Field declaration order is the canonical serialization order used for
    fingerprinting. Do not reorder.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    game_type: GameType = Field(..., alias="gameType", description="Puzzle kind")
    difficulty: Difficulty = Field(..., description="easy, medium or hard")
    topics: list[str] = Field(
        default_factory=list,
        description="Ordered topics for the puzzle (order affects the cache key)",
    )
    language: str = Field(..., description="Language of the puzzle content", min_length=1)

    @field_validator("game_type", "difficulty", mode="before")
    @classmethod
    def _normalize_case(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value
