"""
Scoring engine and correct-answer encoding.

Correct answers are stored as zero-based option indices. Letters (A-D) are
only accepted from the LLM and shown to admins; conversion happens here.
"""

from typing import Any, Dict, Optional, Sequence

OPTION_LETTERS = "ABCD"
OPTIONS_PER_QUESTION = len(OPTION_LETTERS)


def letter_to_index(letter: str) -> int:
    """Convert an option letter (A-D, any case) to its zero-based index."""
    normalized = letter.strip().upper()
    if len(normalized) != 1 or normalized not in OPTION_LETTERS:
        raise ValueError(f"Invalid answer letter: {letter!r}")
    return ord(normalized) - ord("A")


def index_to_letter(index: int) -> str:
    """Convert a zero-based option index to its letter."""
    if not 0 <= index < OPTIONS_PER_QUESTION:
        raise ValueError(f"Answer index out of range: {index!r}")
    return OPTION_LETTERS[index]


def normalize_correct_answer(value: Any) -> int:
    """
    Normalize a correct-answer value to a zero-based index.

    Accepts an int 0-3, a digit string ("2") or a letter ("C").

    Raises:
        ValueError: If the value cannot be mapped to an option index
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid correct answer: {value!r}")
    if isinstance(value, int):
        index = value
    elif isinstance(value, str) and value.strip().isdigit():
        index = int(value.strip())
    elif isinstance(value, str):
        return letter_to_index(value)
    else:
        raise ValueError(f"Invalid correct answer: {value!r}")

    if not 0 <= index < OPTIONS_PER_QUESTION:
        raise ValueError(f"Answer index out of range: {value!r}")
    return index


def score_answers(questions: Sequence[Dict[str, Any]], answers: Sequence[Optional[int]]) -> int:
    """
    Count the positions where the submitted answer matches the correct index.

    Missing trailing answers and None entries count as incorrect.
    """
    score = 0
    for position, question in enumerate(questions):
        if position >= len(answers):
            break
        if answers[position] is not None and answers[position] == question["correct_answer"]:
            score += 1
    return score


def grade(score: int, total: int, pass_threshold: float) -> Dict[str, Any]:
    """Build the submission result: score, total, rounded percentage and pass flag."""
    percentage = (score / total) * 100 if total else 0.0
    return {
        "score": score,
        "total": total,
        "percentage": round(percentage),
        "passed": percentage >= pass_threshold,
    }
