import pytest
from pydantic import ValidationError

from errors import MismatchError, ParseError
from generator import make_puzzle
from store import ChallengeStore
from validation import check_answer, parse_answer, validate


@pytest.fixture
def store():
    return ChallengeStore()


@pytest.fixture
def token(store):
    return store.create(make_puzzle(3, "+", 4))


def test_scenario_correct(store, token):
    r = validate(store, token, "7")
    assert r.ok is True and r.reason is None
    assert r.challenge.answer == 7


def test_scenario_incorrect(store, token):
    r = validate(store, token, "8")
    assert r.ok is False and r.reason == "Incorrect"
    assert "7" not in r.feedback


def test_scenario_malformed(store, token):
    r = validate(store, token, "seven")
    assert r.ok is False and r.reason == "Malformed"


def test_scenario_reused_token(store, token):
    validate(store, token, "8")
    r = validate(store, token, "7")
    assert r.ok is False and r.reason == "NotFound"
    assert r.challenge is None


def test_malformed_still_consumes(store, token):
    assert validate(store, token, "").reason == "Malformed"
    assert validate(store, token, "7").reason == "NotFound"


def test_success_consumes(store, token):
    assert validate(store, token, "7").ok
    assert validate(store, token, "7").reason == "NotFound"


def test_unknown_token_checked_before_parse(store):
    assert validate(store, "missing", "seven").reason == "NotFound"


@pytest.mark.parametrize(
    "text,value",
    [
        ("7", 7),
        (" 7 ", 7),
        ("+7", 7),
        ("-3", -3),
        ("007", 7),
        ("0000000007", 7),
        ("1234567890", 1234567890),
        ("-98765432101234", -98765432101234),
    ],
)
def test_parse_answer_accepts_integers(text, value):
    assert parse_answer(text) == value


@pytest.mark.parametrize("text", [None, "", "   ", "7.0", "1_0", "seven", "3+4", "1e3", "٧", "1" * 101])
def test_parse_answer_rejects(text):
    with pytest.raises(ParseError):
        parse_answer(text)


def test_check_answer_mismatch():
    store = ChallengeStore()
    c = store.consume(store.create(make_puzzle(9, "-", 4)))
    check_answer(c, "5")
    with pytest.raises(MismatchError):
        check_answer(c, "4")


def test_long_zero_padded_answer_is_correct(store, token):
    assert validate(store, token, "0000000007").ok is True


def test_long_wrong_answer_is_incorrect(store, token):
    r = validate(store, token, "1234567890")
    assert r.ok is False and r.reason == "Incorrect"


def test_result_is_immutable(store, token):
    r = validate(store, token, "7")
    with pytest.raises(ValidationError):
        r.ok = False
