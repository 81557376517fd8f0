import pytest

from gpt_studio.core.errors import UnexpectedResponse
from gpt_studio.core.models import Genre, StoryState
from gpt_studio.core.story_controller import StoryController

SETUP = ["3", "Ada", "Victorian London", "ambition"]


def test_full_story_makes_eleven_calls(fake_llm, make_terminal):
    terminal = make_terminal(SETUP + ["1", "2", "3", "1", "2"])
    controller = StoryController(fake_llm)

    session = controller.run(terminal)

    assert len(fake_llm.calls) == 11
    assert len(session.transcript) == 6
    assert session.chapters_completed == 5
    assert session.state is StoryState.DONE
    assert not session.ended_by_reader
    assert session.parameters.genre is Genre.MYSTERY_THRILLER


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_quit_at_round_k_stops_after_k_minus_one_continuations(k, fake_llm, make_terminal):
    picks = ["1"] * (k - 1) + ["QUIT"]
    controller = StoryController(fake_llm)

    session = controller.run(make_terminal(SETUP + picks))

    assert session.ended_by_reader
    assert session.chapters_completed == k - 1
    assert len(session.transcript) == k
    # opening + k choice calls + (k - 1) continuations
    assert len(fake_llm.calls) == 1 + k + (k - 1)
    assert session.state is StoryState.DONE


def test_continuation_uses_whole_transcript(make_llm, make_terminal):
    llm = make_llm(["opening", "choices A", "chapter one", "choices B", "chapter two"])
    controller = StoryController(llm, max_chapters=2)

    controller.run(make_terminal(SETUP + ["2", "3"]))

    assert "Story segment:\nopening" in llm.user_prompt(1)
    assert 'choice: "2"' in llm.user_prompt(2)
    assert "Previous story context:\nopening\n\n" in llm.user_prompt(2)
    assert "Story segment:\nchapter one" in llm.user_prompt(3)
    assert "Previous story context:\nopening\n\nchapter one\n\n" in llm.user_prompt(4)
    assert controller.session.transcript.snapshot() == [
        "opening",
        "chapter one",
        "chapter two",
    ]


def test_unknown_genre_falls_back(fake_llm, make_terminal):
    controller = StoryController(fake_llm, max_chapters=0)
    session = controller.run(make_terminal(["42", "Bo", "Mars", "hope"]))
    assert session.parameters.genre is Genre.SCIENCE_FICTION
    assert "Science Fiction" in fake_llm.system_prompt(0)


def test_failure_keeps_committed_segments(make_llm, make_terminal):
    llm = make_llm(["opening", "choices", "chapter one"], fail_on=4)
    controller = StoryController(llm)

    with pytest.raises(UnexpectedResponse):
        controller.run(make_terminal(SETUP + ["1"]))

    assert len(llm.calls) == 4
    assert controller.session.transcript.snapshot() == ["opening", "chapter one"]


def test_parameters_are_fixed_once_story_begins(fake_llm, make_terminal):
    controller = StoryController(fake_llm, max_chapters=0)
    session = controller.run(make_terminal(SETUP))
    with pytest.raises(RuntimeError):
        controller.set_parameters(session.parameters)
