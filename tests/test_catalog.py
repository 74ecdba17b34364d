"""
Testing word catalog construction and secret selection.
"""

import json
import random
from datetime import date

import pytest

from wordle.config import ANSWER_LIST, GUESS_LIST, load_word_list, validate_word_list_integrity
from wordle.models import EmptyCatalogError, WordLengthMismatchError
from wordle.services import WordCatalog, daily_index


def test_answers_are_acceptable_guesses(catalog):
    for answer in catalog.answers:
        assert catalog.is_acceptable_guess(answer)

    assert catalog.acceptable_guesses >= set(catalog.answers)


def test_is_acceptable_guess_normalizes_case(catalog):
    assert catalog.is_acceptable_guess("erase")
    assert catalog.is_acceptable_guess(" Speed ")
    assert not catalog.is_acceptable_guess("ZZZZZ")
    assert "robot" in catalog
    assert 12345 not in catalog


def test_answers_keep_supply_order_without_duplicates():
    catalog = WordCatalog(["crane", "ROBOT", "Crane"], [])

    assert catalog.answers == ("CRANE", "ROBOT")
    assert len(catalog) == 2


def test_empty_catalog_is_rejected():
    with pytest.raises(EmptyCatalogError):
        WordCatalog([], ["CRANE"])


@pytest.mark.parametrize("answers, guesses", [
    (["CRANES"], []),
    (["CRANE"], ["CAT"]),
    (["CR4NE"], []),
])
def test_bad_words_are_rejected(answers, guesses):
    with pytest.raises(WordLengthMismatchError):
        WordCatalog(answers, guesses)


def test_custom_word_length():
    catalog = WordCatalog(["FROG", "TOAD"], ["NEWT"], word_length=4)

    assert catalog.word_length == 4
    assert catalog.is_acceptable_guess("NEWT")
    assert catalog.pick_secret(seed=1) == "TOAD"


def test_pick_secret_is_deterministic_with_seed(catalog):
    assert catalog.pick_secret(seed=0) == "SPEED"
    assert catalog.pick_secret(seed=1) == "ROBOT"
    assert catalog.pick_secret(seed=len(catalog) + 1) == "ROBOT"
    assert catalog.pick_secret(seed=42) == catalog.pick_secret(seed=42)


def test_pick_secret_random_draws_from_answers(catalog):
    rng = random.Random(7)
    picks = {catalog.pick_secret(rng=rng) for _ in range(200)}

    assert picks <= set(catalog.answers)
    assert picks == set(catalog.answers)


def test_daily_index_and_daily_secret(catalog):
    assert daily_index(date(2021, 6, 19)) == 0
    assert daily_index(date(2021, 6, 21)) == 2
    assert catalog.pick_daily_secret(date(2021, 6, 20)) == "ROBOT"


def test_from_files(tmp_path):
    answers = tmp_path / "answers.json"
    answers.write_text(json.dumps(["crane", "robot"]))
    guesses = tmp_path / "guesses.txt"
    guesses.write_text("otter\ntrain\n\n")

    catalog = WordCatalog.from_files(str(answers), str(guesses))

    assert catalog.answers == ("CRANE", "ROBOT")
    assert catalog.is_acceptable_guess("TRAIN")


def test_load_word_list_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.json"))

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ValueError):
        load_word_list(str(broken))

    duplicated = tmp_path / "dupes.txt"
    duplicated.write_text("CRANE\ncrane\n")
    with pytest.raises(ValueError, match="Duplicate"):
        load_word_list(str(duplicated))


def test_bundled_word_lists_are_valid():
    assert validate_word_list_integrity(ANSWER_LIST)
    assert validate_word_list_integrity(GUESS_LIST)
    assert set(ANSWER_LIST) <= set(GUESS_LIST)

    catalog = WordCatalog(ANSWER_LIST, GUESS_LIST)
    assert len(catalog) == len(ANSWER_LIST)
