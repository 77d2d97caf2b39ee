import pytest

from meteorfall.main import main


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_runs_limited_frames(headless):
    assert main(["--frames", "3", "--seed", "1"]) == 0


def test_single_frame(headless):
    assert main(["--frames", "1"]) == 0


@pytest.mark.parametrize("frames", ["0", "-2", "many"])
def test_rejects_bad_frame_count(frames):
    with pytest.raises(SystemExit) as info:
        main(["--frames", frames])
    assert info.value.code == 2


def test_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2