# tests/test_corpus.py
import pytest

from freqtab import patterns
from freqtab.corpus import CORPORA, find_n_words, parse_file_spec, read_files
from freqtab.errors import InvalidPattern
from freqtab.freqhash import FrequencyMap


@pytest.fixture
def corpus(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_bytes(b"aaaa")                 # 4 matches
    b.write_bytes(b"ab" * 50)              # 100 matches
    return [(str(a), 2), (str(b), 3)]


def test_each_file_contributes_its_multiplier(corpus):
    h = FrequencyMap()
    assert read_files(h, patterns.LETTER_CHARS, corpus, verbose=False) == 2
    assert h.get("a") == pytest.approx(2 + 1.5)
    assert h.get("b") == pytest.approx(1.5)


def test_unreadable_file_is_skipped(corpus, tmp_path, capsys):
    h = FrequencyMap()
    files = [(str(tmp_path / "missing.txt"), 10)] + corpus
    assert read_files(h, patterns.LETTER_CHARS, files) == 2
    err = capsys.readouterr().err
    assert "[corpus] skip" in err and "missing.txt" in err
    assert f"[corpus] done with {corpus[0][0]} at 2" in err
    assert sum(v for _, v in h.items()) == pytest.approx(5)


def test_bad_pattern_aborts(corpus):
    with pytest.raises(InvalidPattern):
        read_files(FrequencyMap(), "[", corpus, verbose=False)


def test_parallel_matches_sequential(corpus):
    seq = FrequencyMap()
    par = FrequencyMap()
    read_files(seq, patterns.LETTER_DIGRAPHS, corpus, verbose=False)
    read_files(par, patterns.LETTER_DIGRAPHS, corpus, workers=2, verbose=False)
    assert {k: v for k, v in par.items()} == pytest.approx({k: v for k, v in seq.items()})


def test_find_n_words(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_bytes(b"the quick brown fox")
    b.write_bytes(b"the quick dog")
    h = FrequencyMap()
    assert find_n_words(h, 2, [(str(a), 1), (str(b), 4)], verbose=False) == 2
    assert h.get("the quick") == 5
    assert h.get("quick dog") == 4
    assert h.get("brown fox") == 1


@pytest.mark.parametrize("spec,expected", [
    ("notes.txt", ("notes.txt", 1.0)),
    ("notes.txt:3", ("notes.txt", 3.0)),
    ("dir/x.txt:0.5", ("dir/x.txt", 0.5)),
    ("C:\\data\\x.txt", ("C:\\data\\x.txt", 1.0)),
])
def test_parse_file_spec(spec, expected):
    assert parse_file_spec(spec) == expected


def test_builtin_corpora():
    assert [m for _, m in CORPORA["all"]] == [18, 25, 4, 2, 1, 1, 15, 20]
    assert [m for _, m in CORPORA["no_prog"]] == [18, 25, 15, 20]
    assert [m for _, m in CORPORA["programming"]] == [4, 2, 1, 1]


def test_clean_repairs_entities_before_counting(tmp_path):
    p = tmp_path / "page.html"
    p.write_bytes(b"fish &amp; chips")
    files = [(str(p), 3)]

    raw = FrequencyMap()
    read_files(raw, patterns.WORDS, files, verbose=False)
    assert raw.get("amp") == pytest.approx(1)

    cleaned = FrequencyMap()
    read_files(cleaned, patterns.WORDS, files, verbose=False, clean=True)
    assert {k: v for k, v in cleaned.items()} == pytest.approx({"fish": 1.5, "chips": 1.5})


def test_clean_applies_to_word_windows(tmp_path):
    p = tmp_path / "page.html"
    p.write_bytes("rock &amp; roll cafÃ©".encode("utf-8"))
    h = FrequencyMap()
    find_n_words(h, 2, [(str(p), 1)], verbose=False, clean=True)
    assert h.get("rock roll") == 1
    assert h.get("roll caf") == 1
    assert "amp" not in {w for k, _ in h.items() for w in k.split()}
