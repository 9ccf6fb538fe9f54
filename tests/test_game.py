import pytest
from wordstar.engine import (
    CharState,
    GameSession,
    GameState,
    InconsistentCharState,
    InvalidGuess,
    InvalidLength,
    LengthMismatch,
    NoAttemptsRemaining,
    TargetNotInDictionary,
    WordSet,
)

A, M, C = CharState.ABSENT, CharState.MISPLACED, CharState.CORRECT


@pytest.fixture
def big_dict():
    return WordSet(5, ["clone", "colon", "spoon", "ovolo", "potoo", "other", "siena"])

@pytest.fixture
def small_dict():
    return WordSet(3, ["rat", "dog", "cat", "tar"])


def _states(result):
    return [fb.state for fb in result]


def test_game_setup(small_dict):
    game = GameSession(small_dict, "dog", 3)
    assert game.state is GameState.PLAYING
    assert game.history == ()
    assert len(game.keyboard_view) == 0
    assert game.attempts_used == 0 and game.attempts_remaining == 3
    assert game.word_length == 3 and not game.is_over

def test_game_colon_walkthrough(big_dict):
    game = GameSession(big_dict, "colon", 6)

    r = game.submit("clone")
    assert list(r) == [("c", C), ("l", M), ("o", M), ("n", M), ("e", A)]
    assert game.state is GameState.PLAYING

    assert _states(game.submit("spoon")) == [A, A, M, C, C]
    assert _states(game.submit("ovolo")) == [M, A, M, M, A]
    assert game.state is GameState.PLAYING
    assert game.keyboard_view.get("o") is C

    r = game.submit("colon")
    assert r.is_win
    assert game.state is GameState.WON
    assert game.attempts_used == 4
    assert [h.word for h in game.history] == ["clone", "spoon", "ovolo", "colon"]

def test_game_win_then_no_more_guesses(small_dict):
    game = GameSession(small_dict, "dog", 3)
    game.submit("rat")
    game.submit("cat")
    assert game.state is GameState.PLAYING
    game.submit("dog")
    assert game.state is GameState.WON
    kv = game.keyboard_view
    assert kv.letters(A) == sorted("ratc")
    assert kv.letters(C) == sorted("dog")
    with pytest.raises(NoAttemptsRemaining, match="no more guesses allowed"):
        game.submit("tar")

def test_game_lose(small_dict):
    game = GameSession(small_dict, "dog", 2)
    game.submit("rat")
    assert game.state is GameState.PLAYING
    game.submit("cat")
    assert game.state is GameState.LOST
    assert game.is_over and game.attempts_remaining == 0
    with pytest.raises(NoAttemptsRemaining):
        game.submit("dog")
    assert game.attempts_used == 2

def test_win_on_last_attempt_is_a_win(small_dict):
    game = GameSession(small_dict, "dog", 2)
    game.submit("cat")
    game.submit("dog")
    assert game.state is GameState.WON

def test_invalid_guess_consumes_nothing(small_dict):
    game = GameSession(small_dict, "dog", 2)
    for bad in ["abc", "rats", "", "d0g"]:
        with pytest.raises(InvalidGuess):
            game.submit(bad)
    assert game.state is GameState.PLAYING
    assert game.attempts_used == 0 and game.history == ()
    assert len(game.keyboard_view) == 0

def test_invalid_guess_is_a_value_error(small_dict):
    game = GameSession(small_dict, "dog", 2)
    with pytest.raises(ValueError, match="'abc' is not a valid word"):
        game.submit("abc")

def test_guess_is_normalized(small_dict):
    game = GameSession(small_dict, "dog", 2)
    assert game.is_valid_guess("CAT")
    assert game.submit(" CAT ").word == "cat"

def test_target_word_length_not_same(small_dict):
    with pytest.raises(LengthMismatch):
        GameSession(small_dict, "star", 3)

def test_target_word_not_in_dictionary(small_dict):
    with pytest.raises(TargetNotInDictionary, match="target word not present in dictionary"):
        GameSession(small_dict, "mat", 3)

@pytest.mark.parametrize("n", [0, -3])
def test_max_attempts_must_be_positive(small_dict, n):
    with pytest.raises(InvalidLength):
        GameSession(small_dict, "dog", n)

def test_sessions_share_a_wordset(small_dict):
    g1 = GameSession(small_dict, "dog", 6)
    g2 = GameSession(small_dict, "cat", 6)
    g1.submit("cat")
    assert g2.attempts_used == 0
    assert g2.submit("cat").is_win
    assert g1.state is GameState.PLAYING


def test_inconsistent_keyboard_leaves_session_untouched(big_dict):
    game = GameSession(big_dict, "colon", 6)
    game.keyboard_view.record("c", A)  # contradicts the target
    with pytest.raises(InconsistentCharState):
        game.submit("clone")
    assert game.attempts_used == 0 and game.history == ()
    assert game.state is GameState.PLAYING
    assert game.keyboard_view.as_dict() == {"c": A}


@pytest.mark.parametrize("n", [True, False, 2.0])
def test_max_attempts_must_be_an_int(small_dict, n):
    with pytest.raises(InvalidLength):
        GameSession(small_dict, "dog", n)
