import pytest

from nanobrowser import BrowserError, BrowserShellEnv, InvalidLocationError
from nanobrowser.env import DEFAULT_START_PAGE


def test_env_cycle():
    env = BrowserShellEnv(start_page=None)
    state = env.reset()
    assert state["history"] == []
    assert state["location"] is None
    assert state["buttons"] == {"BackCommand": False, "NextCommand": False, "HomeCommand": False}

    state = env.step("go", location="example.com")
    assert state["location"] == "http://example.com"
    assert state["cursor"] == 0

    state = env.step("go", location="http://a.com")
    assert state["buttons"]["BackCommand"]

    state = env.step("back")
    assert state["location"] == "http://example.com"
    assert state["can_go_next"]

    state = env.step("set_home")
    assert state["home"] == "http://example.com"
    assert state["buttons"]["HomeCommand"]

    state = env.step("next")
    state = env.step("add_favorite", name="A")
    assert state["favorites"] == [{"name": "A", "url": "http://a.com"}]

    state = env.step("home")
    assert state["location"] == "http://example.com"
    assert len(state["history"]) == 3

    state = env.step("favorite", name="A")
    assert state["location"] == "http://a.com"
    assert [entry["url"] for entry in state["history"]] == [
        "http://example.com",
        "http://a.com",
        "http://example.com",
        "http://a.com",
    ]


def test_reset_loads_start_page():
    env = BrowserShellEnv()
    state = env.reset()
    assert state["location"] == DEFAULT_START_PAGE
    assert state["title"] == "NanoBrowser"


def test_reset_discards_previous_session():
    env = BrowserShellEnv(start_page="start.example.com")
    env.reset()
    env.step("go", location="other.example.com")
    env.step("set_home")
    state = env.reset()
    assert [entry["url"] for entry in state["history"]] == ["http://start.example.com"]
    assert state["home"] is None


def test_step_validates_actions_and_args():
    env = BrowserShellEnv(start_page=None)
    env.reset()
    with pytest.raises(BrowserError, match="Unknown action"):
        env.step("reload")
    with pytest.raises(BrowserError, match="Missing required args"):
        env.step("go")
    with pytest.raises(BrowserError, match="Unexpected args"):
        env.step("back", steps="2")


def test_controller_errors_propagate_without_changing_state():
    env = BrowserShellEnv(start_page="a.com")
    before = env.reset()
    with pytest.raises(InvalidLocationError):
        env.step("go", location="http://bad host")
    with pytest.raises(BrowserError):
        env.step("back")
    with pytest.raises(BrowserError):
        env.step("favorite", name="nope")
    assert env.get_state() == before


def test_hover_only_touches_status():
    env = BrowserShellEnv(start_page="a.com")
    env.reset()
    state = env.step("hover", location="http://b.com/page")
    assert state["status"] == "http://b.com/page"
    assert len(state["history"]) == 1

    state = env.step("hover")
    assert state["status"] == " "


def test_follow_navigates_and_clears_status():
    env = BrowserShellEnv(start_page="a.com")
    env.reset()
    env.step("hover", location="http://b.com/page")
    state = env.step("follow", location="http://b.com/page")
    assert state["location"] == "http://b.com/page"
    assert state["status"] == " "


def test_labels_follow_language_and_overrides(capsys):
    env = BrowserShellEnv(start_page=None, language="Italiano", labels={"HomeCommand": "Casa"})
    env.reset()
    env.pretty_print()
    out = capsys.readouterr().out
    assert "(Indietro)  (Avanti)  (Casa)" in out
    assert env.load_error("x") == "Impossibile caricare x"


def test_pretty_print(capsys):
    env = BrowserShellEnv(start_page="a.com")
    env.reset()
    env.step("add_favorite", name="A")
    env.pretty_print()
    out = capsys.readouterr().out
    assert "Location: http://a.com" in out
    assert "*[0] http://a.com" in out
    assert "'A' -> http://a.com" in out
    assert "(Back)" in out


def test_colliding_labels_keep_every_button():
    env = BrowserShellEnv(start_page="a.com", labels={"NextCommand": "Back"})
    env.reset()
    env.step("go", location="b.com")
    state = env.step("back")
    assert state["buttons"] == {"BackCommand": False, "NextCommand": True, "HomeCommand": False}
