import pytest

from wfrest.verb import Verb, str_to_verb, verb_to_str


@pytest.mark.parametrize("verb", list(Verb))
def test_round_trip(verb):
    assert str_to_verb(verb_to_str(verb)) is verb


@pytest.mark.parametrize("name", ["get", "Get", "GET", "gEt"])
def test_case_insensitive(name):
    assert str_to_verb(name) is Verb.GET


def test_known_names():
    assert verb_to_str(Verb.GET) == "GET"
    assert verb_to_str(Verb.DELETE) == "DELETE"
    assert verb_to_str(Verb.ANY) == "ANY"


@pytest.mark.parametrize("name", ["OPTIONS", "", "TRACE"])
def test_unknown_name_is_any(name):
    result = str_to_verb(name)
    assert result == Verb.ANY
    assert verb_to_str(result) == "ANY"


def test_unknown_value():
    assert verb_to_str(99) == "[UNKNOWN]"


def test_ordering_follows_declaration():
    shuffled = [str_to_verb(name) for name in ["PATCH", "ANY", "POST", "GET"]]
    ordered = [verb_to_str(verb) for verb in sorted(shuffled)]
    assert ordered == ["ANY", "GET", "POST", "PATCH"]