import pytest


@pytest.fixture()
def answers(monkeypatch: pytest.MonkeyPatch):
    """Scripts operator input: each call to the prompter pops the next answer."""
    asked = []

    def install(*replies):
        queue = list(replies)

        def fake_prompt(question: str) -> str:
            asked.append(question)
            return queue.pop(0).strip()

        monkeypatch.setattr("vortex_cursor.initializer.prompt_user", fake_prompt)
        return asked

    return install
