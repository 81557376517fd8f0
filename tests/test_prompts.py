from gpt_studio.core.models import CodeSubmission, Genre, StoryParameters
from gpt_studio.core.prompts import DefaultPromptFactory

factory = DefaultPromptFactory()

SUBMISSION = CodeSubmission(code="print('hi')", language="Python", filename="hi.py")
PARAMS = StoryParameters(
    genre=Genre.HORROR, character="Mara", setting="a lighthouse", theme="grief"
)


def test_analysis_embeds_code_in_language_fence():
    p = factory.code_analysis(submission=SUBMISSION)
    assert "```python\nprint('hi')\n```" in p.user
    assert "FILENAME: hi.py" in p.user
    assert "OVERALL SCORE" in p.user
    assert "Python" in p.system
    assert (p.temperature, p.max_tokens) == (0.3, 1500)


def test_refactor_includes_analysis_results():
    p = factory.code_refactor(submission=SUBMISSION, analysis="Uses print.")
    assert "ANALYSIS RESULTS:\nUses print." in p.user
    assert (p.temperature, p.max_tokens) == (0.2, 1200)


def test_documentation_parameters():
    p = factory.documentation(submission=SUBMISSION)
    assert "TROUBLESHOOTING" in p.user
    assert (p.temperature, p.max_tokens) == (0.4, 1000)


def test_story_beginning_mentions_all_parameters():
    p = factory.story_beginning(params=PARAMS)
    for value in ("Horror", "Mara", "a lighthouse", "grief"):
        assert value in p.user
    assert "specializing in Horror" in p.system
    assert (p.temperature, p.max_tokens) == (0.9, 500)


def test_continuation_quotes_choice_and_transcript():
    p = factory.story_continuation(params=PARAMS, choice="2", transcript="one\n\ntwo")
    assert 'reader\'s choice: "2"' in p.user
    assert "Previous story context:\none\n\ntwo" in p.user
    assert (p.temperature, p.max_tokens) == (0.8, 400)


def test_choice_generation_asks_for_three_options():
    p = factory.choice_generation(params=PARAMS, segment="The lamp went out.")
    assert "The lamp went out." in p.user
    assert "3. [Choice option]" in p.user
    assert "4. [Choice option]" not in p.user
    assert (p.temperature, p.max_tokens) == (0.7, 200)


def test_assemble_orders_system_then_user():
    p = factory.documentation(submission=SUBMISSION)
    messages = factory.assemble(prompt=p)
    assert [m["role"] for m in messages] == ["system", "user"]
    assert messages[1]["content"] == p.user
