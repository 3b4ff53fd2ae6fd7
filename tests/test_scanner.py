import pytest

from mixed_script_scanner.models import Match
from mixed_script_scanner.scanner import (
    MixedScriptScanner,
    find_mixed_words,
    is_mixed_script_word,
    scan,
)


def test_scan_ignores_pure_script_words():
    assert list(scan("привет world")) == []


def test_scan_matches_whole_mixed_token():
    assert list(scan("helloпривет")) == [Match(start=0, length=11, text="helloпривет")]


def test_scan_only_reports_the_mixed_token():
    text = "test тест testт"
    matches = find_mixed_words(text)

    assert matches == [Match(start=10, length=5, text="testт")]
    assert text[matches[0].start : matches[0].end] == "testт"


def test_scan_treats_yo_as_cyrillic():
    assert list(scan("Ёжик")) == []
    assert list(scan("aёb")) == [Match(start=0, length=3, text="aёb")]


@pytest.mark.parametrize("text", ["", "   ", "\t\n", "12345 _ 678", "!?,.;"])
def test_scan_yields_nothing_without_letters_or_text(text: str):
    assert list(scan(text)) == []


@pytest.mark.parametrize("word", ["aА", "AА", "aа", "Аa", "яZ"])
def test_scan_is_case_insensitive(word: str):
    assert find_mixed_words(word) == [Match(start=0, length=2, text=word)]


def test_digits_and_underscores_do_not_block_a_match():
    matches = find_mixed_words("id: var_1х2y and 42_мир")

    assert [m.text for m in matches] == ["var_1х2y"]
    assert matches[0].start == 4


def test_cyrillic_before_latin_matches_too():
    # "Рython" starts with a Cyrillic Р.
    assert [m.text for m in scan("I like Рython.")] == ["Рython"]


def test_long_pure_words_never_match():
    assert list(scan("a" * 500 + " " + "б" * 500)) == []


def test_punctuation_separates_words():
    matches = find_mixed_words("foo-бар, baz.qux/кот")

    assert matches == []


def test_matches_are_sorted_and_non_overlapping():
    text = "мixed, cлово and пpивет"
    matches = find_mixed_words(text)

    assert [m.text for m in matches] == ["мixed", "cлово", "пpивет"]
    for previous, current in zip(matches, matches[1:]):
        assert previous.end <= current.start


def test_letters_of_other_alphabets_stay_inside_the_word():
    assert find_mixed_words("naïveб") == [Match(start=0, length=6, text="naïveб")]
    assert find_mixed_words("Kиїв") == [Match(start=0, length=4, text="Kиїв")]
    assert find_mixed_words("Ölп") == [Match(start=0, length=3, text="Ölп")]


def test_words_without_both_alphabets_never_yield_fragments():
    assert find_mixed_words("Київ naïve Öl αβγ") == []
    assert find_mixed_words("αб") == []


def test_scan_result_is_restartable():
    result = MixedScriptScanner().scan("один twoтри four")

    first = list(result)
    second = list(result)

    assert first == second == [Match(start=5, length=6, text="twoтри")]
    assert bool(result)
    assert not bool(scan("plain text"))


def test_scan_is_idempotent_across_calls():
    text = "Bаш cчёт and уour оrder"
    assert list(scan(text)) == list(scan(text))


def test_is_mixed_script_word():
    assert is_mixed_script_word("Bаш")
    assert not is_mixed_script_word("Ваш")
    assert not is_mixed_script_word("hello")
    assert not is_mixed_script_word("Bаш cчёт")
    assert not is_mixed_script_word("")
