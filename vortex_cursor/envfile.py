import os
import re
from typing import Callable
from vortex_cursor.config import ENV_FILE, API_KEY_NAME, ENV_HEADER

# Matches to end of line only; "." never crosses a newline
ASSIGNMENT_RE = re.compile(re.escape(API_KEY_NAME) + r"=.*")


def read_env(path: str) -> str:
    if not os.path.exists(path):
        return ""
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def has_key(content: str, key: str = API_KEY_NAME) -> bool:
    return key in content


def merge_api_key(content: str, api_key: str) -> str:
    """
    Replaces every VORTEX_API_KEY=... assignment with the new value,
    or appends a commented block when the key does not occur at all.
    """
    line = f"{API_KEY_NAME}={api_key}"
    if has_key(content):
        # Callable replacement so backslashes in the key stay literal
        return ASSIGNMENT_RE.sub(lambda m: line, content)
    return f"{content}\n{ENV_HEADER}\n{line}\n"


def reconcile_env(cwd: str, api_key: str, ask: Callable[[str], str]) -> bool:
    """
    Adds or replaces the API key in <cwd>/.env.local.
    Asks before touching an existing assignment.
    :return: False if the operator declined and the file was left alone.
    """
    env_path = os.path.join(cwd, ENV_FILE)
    content = read_env(env_path)

    if has_key(content):
        answer = ask(f"\n{ENV_FILE} already contains {API_KEY_NAME}. Overwrite? (y/N): ")
        if answer.lower() != "y":
            return False

    with open(env_path, 'w', encoding='utf-8', newline='') as f:
        f.write(merge_api_key(content, api_key))
    return True
