import dataclasses
import pickle

import pytest

from lexicon import (
    Lexicon,
    LexiconFormatError,
    load_answers,
    load_lexicon,
    parse_lexicon,
)


def test_parse_lexicon():
    lex = parse_lexicon(["right 100", "", "wrong 50\n", "wrung 7"])
    assert lex.words == frozenset({"right", "wrong", "wrung"})
    assert len(lex) == 3
    assert "wrong" in lex
    assert "night" not in lex
    assert lex.count("right") == 100
    assert lex.count("night") == 0
    assert lex.by_count() == ["right", "wrong", "wrung"]


def test_by_count_ties_are_alphabetical():
    lex = parse_lexicon(["wrung 5", "right 5", "wrong 9"])
    assert lex.by_count() == ["wrong", "right", "wrung"]


@pytest.mark.parametrize("bad,lineno", [
    (["right 1", "wrong"], 2),
    (["right ten"], 1),
    (["right 1", "", "wrong 2.5"], 3),
    (["rights 1"], 1),
])
def test_malformed_lines(bad, lineno):
    with pytest.raises(LexiconFormatError) as excinfo:
        parse_lexicon(bad)
    assert excinfo.value.lineno == lineno
    assert isinstance(excinfo.value, ValueError)


def test_lexicon_is_read_only():
    lex = parse_lexicon(["right 1"])
    with pytest.raises(TypeError):
        lex.counts["wrong"] = 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        lex.words = frozenset()


def test_lexicon_copies_input():
    counts = {"right": 1}
    lex = Lexicon(counts=counts)
    counts["wrong"] = 2
    assert "wrong" not in lex


def test_load_lexicon_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("right 3\nwrong 2\n", encoding="utf-8")
    lex = load_lexicon(path)
    assert lex.words == {"right", "wrong"}


def test_load_lexicon_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lexicon(tmp_path / "missing.txt")


def test_bundled_answers_are_valid_guesses():
    lex = load_lexicon()
    answers = load_answers()
    assert answers
    assert all(a in lex for a in answers)


def test_load_answers_from_file(tmp_path):
    path = tmp_path / "answers.txt"
    path.write_text("right wrong\nwrung\n", encoding="utf-8")
    assert load_answers(path) == ["right", "wrong", "wrung"]


def test_lexicon_hash_and_pickle():
    lex = parse_lexicon(["right 3", "wrong 2"])
    same = parse_lexicon(["wrong 2", "right 3"])
    assert lex == same
    assert hash(lex) == hash(same)
    assert {lex: "ok"}[same] == "ok"

    restored = pickle.loads(pickle.dumps(lex))
    assert restored == lex
    assert restored.count("right") == 3
    with pytest.raises(TypeError):
        restored.counts["night"] = 1
