import pytest
from wordlebot.engine import (
    Knowledge, NoCandidatesError, Verdict, apply_learning, filter_candidates,
    is_winning, make_guess, parse_response, to_pattern,
)
from wordlebot.engine.feedback import InvalidResponseError
from wordlebot.engine.guess import is_valid, letter_frequency, revealing_word, word_score

C, P, A = Verdict.CORRECT, Verdict.PRESENT, Verdict.ABSENT


# --- feedback ---
@pytest.mark.parametrize("feedback,expected", [
    ((C, C, C, C, C), True),
    ((C, C, C, P, C), False),
    ((A, A, A, A, A), False),
    ((), False),
])
def test_is_winning(feedback, expected):
    assert is_winning(feedback) is expected


def test_parse_response_valid():
    assert parse_response("y.x.x") == (C, P, A, P, A)


def test_parse_response_rejects_unknown_char():
    with pytest.raises(InvalidResponseError):
        parse_response("y.xax")


def test_to_pattern():
    assert to_pattern((C, P, A, A, C)) == "GY--G"


# --- knowledge ---
def test_apply_learning_correct_letter():
    k = apply_learning(Knowledge.empty(), "abc", (C, A, A))
    assert k.correct_letters == {("a", 0)}
    assert k.contained_letters == {}
    assert k.guessed_words == ("abc",)


def test_apply_learning_contained_letter():
    k = apply_learning(Knowledge.empty(), "abc", (P, A, A))
    assert k.correct_letters == frozenset()
    assert k.contained_letters == {"a": (0,)}


def test_apply_learning_extends_contained_positions():
    k = Knowledge(contained_letters={"a": [0]})
    k2 = apply_learning(k, "bac", (A, P, A))
    assert k2.contained_letters == {"a": (0, 1)}
    # input untouched
    assert k.contained_letters == {"a": (0,)}
    assert k.guessed_words == ()


def test_apply_learning_is_monotonic():
    k = Knowledge(guessed_words=["crane"], correct_letters=[("r", 1)],
                  contained_letters={"e": [4]})
    k2 = apply_learning(k, "bride", (A, C, A, A, P))
    assert set(k.guessed_words) <= set(k2.guessed_words)
    assert k.correct_letters <= k2.correct_letters
    for ch, positions in k.contained_letters.items():
        assert set(positions) <= set(k2.contained_letters[ch])
    assert k2.guessed_words == ("crane", "bride")


def test_apply_learning_length_mismatch():
    with pytest.raises(ValueError):
        apply_learning(Knowledge.empty(), "abc", (C, C))


def test_knowledge_is_hashable_and_read_only():
    k = apply_learning(Knowledge.empty(), "abc", (P, A, A))
    assert hash(k) == hash(Knowledge(guessed_words=["abc"], contained_letters={"a": [0]}))
    assert hash(Knowledge.empty()) == hash(Knowledge())
    with pytest.raises(TypeError):
        k.contained_letters["z"] = (1,)
    assert k.contained_letters == {"a": (0,)}


def test_knowledge_copies_caller_mapping():
    positions = {"a": [0]}
    k = Knowledge(contained_letters=positions)
    positions["b"] = [1]
    assert k.contained_letters == {"a": (0,)}


# --- filtering ---
def test_filter_respects_all_constraints():
    words = ["abc", "bcd", "acd", "bac", "cab"]
    k = Knowledge(guessed_words=["abc"], contained_letters={"a": [0]})
    assert filter_candidates(words, k) == ["bac", "cab"]


def test_filter_is_idempotent():
    words = ["crane", "raise", "stare", "trace", "cared", "racer"]
    k = apply_learning(Knowledge.empty(), "raise", (P, P, A, A, C))
    once = filter_candidates(words, k)
    assert filter_candidates(once, k) == once


def test_is_valid_rejects_guessed_word():
    assert not is_valid("foo", Knowledge(guessed_words=["foo"]))


# --- guess selection ---
def test_guessed_one_word_dont_guess_again():
    k = Knowledge(guessed_words=["foo"])
    assert make_guess(["foo", "bar"], k) == "bar"


def test_guessed_one_correct_letter_guess_next_valid_word():
    k = Knowledge(guessed_words=["abc"], correct_letters=[("a", 0)])
    assert make_guess(["abc", "bcd", "abd"], k) == "abd"


def test_contained_letter_guess_word_with_letter_elsewhere():
    k = Knowledge(guessed_words=["abc"], contained_letters={"a": [0]})
    assert make_guess(["abc", "bcd", "acd", "bac"], k) == "bac"


def test_two_candidates_take_first_in_list_order():
    # "zzz" scores lower but scoring is skipped for <= 2 candidates
    assert make_guess(["zzz", "abc"], Knowledge.empty()) == "zzz"


def test_three_candidates_pick_highest_score():
    # a1 b2 c3 d2 e1 -> abc=6, bcd=7, cde=6
    assert make_guess(["abc", "bcd", "cde"], Knowledge.empty()) == "bcd"


def test_ties_go_to_first_word():
    assert revealing_word(["abc", "bca", "cab"], Knowledge.empty()) == "abc"


def test_letter_frequency_counts_raw_occurrences():
    freq = letter_frequency(["eerie", "tepee"])
    assert freq["e"] == 6 and freq["r"] == 1 and freq["z"] == 0


def test_word_score_counts_distinct_letters_once():
    freq = letter_frequency(["eerie", "tepee"])
    assert word_score("eerie", freq, Knowledge.empty()) == freq["e"] + freq["r"] + freq["i"]


def test_word_score_ignores_letters_from_previous_guesses():
    freq = letter_frequency(["abc", "bcd", "cde"])
    k = Knowledge(guessed_words=["bxx"])
    assert word_score("bcd", freq, k) == 3 + 2  # 'b' already tried, unknown status
    assert revealing_word(["abc", "bcd", "cde"], k) == "cde"


def test_word_score_keeps_known_letters():
    freq = letter_frequency(["abc", "bcd", "cde"])
    k = Knowledge(guessed_words=["bxx"], contained_letters={"b": [0]})
    assert word_score("bcd", freq, k) == 7


def test_revealing_word_needs_words():
    with pytest.raises(NoCandidatesError):
        revealing_word([], Knowledge.empty())


def test_no_candidates_fails_fast():
    k = Knowledge(correct_letters=[("q", 0)])
    with pytest.raises(NoCandidatesError):
        make_guess(["abc", "bcd"], k)
