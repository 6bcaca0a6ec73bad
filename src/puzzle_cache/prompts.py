"""Prompt catalog for puzzle generation.

Each GameType maps to one PuzzleTemplate: the prompt text sent to Gemini and
the response schema that constrains its JSON output. Adding a puzzle kind
means adding a GameType member and a catalog entry; nothing else changes.
"""

import textwrap
from dataclasses import dataclass
from typing import Any

from puzzle_cache.dto import GameType, PuzzleRequest

DEFAULT_TOPICS_CLAUSE = "general knowledge"


@dataclass(frozen=True)
class PuzzleTemplate:
    """Prompt text and output schema for one puzzle kind.

    Attributes:
        label: Human name of the puzzle kind, interpolated into the prompt
        prompt: Template with {difficulty}, {label}, {language} and {topics} fields
        schema: Gemini responseSchema document (OpenAPI subset, upper-case types)
    """

    label: str
    prompt: str
    schema: dict[str, Any]

    def render(self, request: PuzzleRequest) -> str:
        """Fill the prompt template from the request parameters."""
        return self.prompt.format(
            difficulty=request.difficulty.value,
            label=self.label,
            language=request.language,
            topics=topics_clause(request.topics),
        )


def topics_clause(topics: list[str]) -> str:
    """Render the topics sentence, falling back to general knowledge."""
    if topics:
        return f"about {', '.join(topics)}"
    return DEFAULT_TOPICS_CLAUSE


def _grid_size_schema() -> dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {
            "rows": {"type": "INTEGER"},
            "cols": {"type": "INTEGER"},
        },
        "required": ["rows", "cols"],
    }


def _puzzle_schema(game_type: GameType, data_field: str, data_schema: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {
            "gameType": {"type": "STRING", "enum": [game_type.value]},
            "difficulty": {"type": "STRING", "enum": ["easy", "medium", "hard"]},
            "topics": {"type": "ARRAY", "items": {"type": "STRING"}},
            data_field: data_schema,
        },
        "required": ["gameType", "difficulty", "topics"],
    }


CROSSWORD_PROMPT = textwrap.dedent(
    """\
    Generate a {difficulty} {label} in {language}.
    {topics}
    Provide a grid of 8x8 to 10x10.
    Return the data as a JSON object with 'gameType' (crossword), 'difficulty', 'topics', and 'crosswordData'.
    'crosswordData' should contain 'gridSize' (rows, cols) and an array of 'words'.
    Each 'word' object should have 'word', 'clue', 'startRow', 'startCol' (0-indexed), and 'direction' ('across' or 'down').
    Ensure words fit the grid and intersect correctly without gaps. All cells in a word must be valid letters.
    Prioritize well-formed and solvable puzzles.
    """
)

WORDSEARCH_PROMPT = textwrap.dedent(
    """\
    Generate a {difficulty} {label} in {language}.
    {topics}
    Provide a grid size based on difficulty: Easy (10x10), Medium (12x12), Hard (15x15).
    Return the data as a JSON object with 'gameType' (wordsearch), 'difficulty', 'topics', and 'wordSearchData'.
    'wordSearchData' should contain 'gridSize' (rows, cols) and a list of 'wordsToFind'.
    **Crucially, do NOT generate the full grid of letters. ONLY provide gridSize and wordsToFind.**
    The 'wordsToFind' list should contain 10-15 unique words (depending on difficulty) that are relevant to the topics and suitable for a word search puzzle (e.g., no spaces, only letters, common vocabulary).
    Ensure these words are always in the uppercase.
    Prioritize well-formed words and a good mix for the chosen difficulty.
    """
)

CROSSWORD_SCHEMA = _puzzle_schema(
    GameType.CROSSWORD,
    "crosswordData",
    {
        "type": "OBJECT",
        "properties": {
            "gridSize": _grid_size_schema(),
            "words": {
                "type": "ARRAY",
                "items": {
                    "type": "OBJECT",
                    "properties": {
                        "word": {"type": "STRING"},
                        "clue": {"type": "STRING"},
                        "startRow": {"type": "INTEGER"},
                        "startCol": {"type": "INTEGER"},
                        "direction": {"type": "STRING", "enum": ["across", "down"]},
                    },
                    "required": ["word", "clue", "startRow", "startCol", "direction"],
                },
            },
        },
        "required": ["gridSize", "words"],
    },
)

WORDSEARCH_SCHEMA = _puzzle_schema(
    GameType.WORDSEARCH,
    "wordSearchData",
    {
        "type": "OBJECT",
        "properties": {
            "gridSize": _grid_size_schema(),
            "wordsToFind": {"type": "ARRAY", "items": {"type": "STRING"}},
        },
        "required": ["gridSize", "wordsToFind"],
    },
)

CATALOG: dict[GameType, PuzzleTemplate] = {
    GameType.CROSSWORD: PuzzleTemplate(
        label="crossword puzzle",
        prompt=CROSSWORD_PROMPT,
        schema=CROSSWORD_SCHEMA,
    ),
    GameType.WORDSEARCH: PuzzleTemplate(
        label="word search puzzle",
        prompt=WORDSEARCH_PROMPT,
        schema=WORDSEARCH_SCHEMA,
    ),
}


def template_for(game_type: GameType) -> PuzzleTemplate:
    """Look up the template for a puzzle kind.

    Raises:
        KeyError: If a GameType member was added without a catalog entry
    """
    return CATALOG[game_type]
