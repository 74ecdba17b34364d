"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from functools import total_ordering
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class LetterResult(Enum):
    """Evaluation of a single letter of a guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


@total_ordering
class HintStatus(Enum):
    """
    Best-known status of a keyboard letter.

    Ordered UNKNOWN < ABSENT < PRESENT < CORRECT so that hints can only be
    upgraded by later guesses.
    """
    UNKNOWN = "unknown"
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def rank(self) -> int:
        return _HINT_RANK[self]

    @classmethod
    def from_result(cls, result: LetterResult) -> "HintStatus":
        return cls(result.value)

    def __lt__(self, other):
        if not isinstance(other, HintStatus):
            return NotImplemented
        return self.rank < other.rank


_HINT_RANK = {
    HintStatus.UNKNOWN: 0,
    HintStatus.ABSENT: 1,
    HintStatus.PRESENT: 2,
    HintStatus.CORRECT: 3,
}


class GameStatus(Enum):
    """Lifecycle of a single round."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class ScoredLetter:
    letter: str
    result: LetterResult


@dataclass(frozen=True)
class Guess:
    """A submitted word paired with its per-letter evaluation."""
    letters: Tuple[ScoredLetter, ...]

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self) -> Iterator[ScoredLetter]:
        return iter(self.letters)

    def __getitem__(self, index: int) -> ScoredLetter:
        return self.letters[index]

    @property
    def word(self) -> str:
        return ''.join(scored.letter for scored in self.letters)

    @property
    def results(self) -> List[LetterResult]:
        return [scored.result for scored in self.letters]

    @property
    def is_correct(self) -> bool:
        return bool(self.letters) and all(
            scored.result is LetterResult.CORRECT for scored in self.letters
        )

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Letter/result pairs with the result as a string for JSON serialization."""
        return [(scored.letter, scored.result.value) for scored in self.letters]


@dataclass
class GameSnapshot:
    """Serializable view of a round handed to API clients."""
    game_id: str
    current_round: int
    max_rounds: int
    word_length: int
    status: str
    game_over: bool
    won: bool
    guesses: List[str] = field(default_factory=list)
    guess_results: List[List[Tuple[str, str]]] = field(default_factory=list)
    letter_status: Dict[str, str] = field(default_factory=dict)
    answer: Optional[str] = None  # Only included when game is over
