from typing import Optional
from prompt_toolkit import PromptSession
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output


def prompt_user(question: str, input: Optional[Input] = None, output: Optional[Output] = None) -> str:
    """
    Asks a single question and blocks until a line is entered.
    The terminal session only lives for this one question.
    :return: The answer with surrounding whitespace stripped. Ctrl-D counts as an empty answer.
    """
    with create_app_session(input=input, output=output):
        session = PromptSession()
        try:
            answer = session.prompt(question)
        except EOFError:
            return ""
    return answer.strip()
