import pytest

from wordgame.services.game.matching import edit_distance, normalize_word, words_match


def test_normalize_trims_and_lowercases():
    assert normalize_word('  Hello World \n') == 'hello world'


@pytest.mark.parametrize('a,b,expected', [
    ('kitten', 'sitting', 3),
    ('flaw', 'lawn', 2),
    ('color', 'colour', 1),
    ('sun', 'moon', 3),
    ('abc', 'abc', 0),
    ('', 'abc', 3),
    ('abc', '', 3),
    ('', '', 0),
])
def test_edit_distance(a, b, expected):
    assert edit_distance(a, b) == expected
    assert edit_distance(b, a) == expected


def test_edit_distance_uses_full_length():
    # Shared prefix does not hide the trailing difference
    assert edit_distance('match', 'matches') == 2


def test_same_word_matches():
    for word in ('a', 'cat', 'elephant'):
        assert words_match(word, word)


def test_single_typo_matches():
    assert words_match('cat', 'bat')
    assert words_match('color', 'colour')
    assert words_match('cart', 'cat')


def test_distant_words_do_not_match():
    assert not words_match('cat', 'dog')
    assert not words_match('sun', 'moon')
    assert not words_match('cat', 'act')


def test_match_is_normalized():
    assert words_match(' Cat ', 'cat')
    assert words_match('SUN', 'sun')


def test_empty_against_single_character_matches():
    assert words_match('', '')
    assert words_match('', 'a')
    assert not words_match('', 'ab')
