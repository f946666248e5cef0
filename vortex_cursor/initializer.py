import os
from typing import Callable, Optional
from rich.console import Console
from vortex_cursor.config import (
    API_KEYS_URL, ADMIN_URL, ENV_FILE, API_KEY_NAME,
    PROMPTS_DIR, TEMPLATE_NAME, KEY_ECHO_LENGTH
)
from vortex_cursor.envfile import reconcile_env
from vortex_cursor.prompter import prompt_user
from vortex_cursor.template import materialize_prompt

console = Console(highlight=False, emoji=False, soft_wrap=True)


class SetupAborted(Exception):
    """Required input was not supplied; nothing has been written."""


def init_vortex_cursor(cwd: str, ask: Optional[Callable[[str], str]] = None) -> None:
    ask = ask or prompt_user

    console.print("🚀 Setting up Vortex AI integration for Cursor...\n")
    console.print("First, we need your Vortex credentials:\n")

    api_key = ask(f"Vortex API Key (from {API_KEYS_URL}): ").strip()
    if not api_key:
        raise SetupAborted("API key is required")

    widget_id = ask(f"Widget ID (from {ADMIN_URL}): ").strip()
    if not widget_id:
        raise SetupAborted("Widget ID is required")

    console.print("\n✅ Credentials received\n")

    materialize_prompt(cwd, api_key, widget_id)
    prompt_rel = os.path.join(PROMPTS_DIR, TEMPLATE_NAME)
    console.print(f"✅ Created {prompt_rel}\n", markup=False)

    if reconcile_env(cwd, api_key, ask):
        console.print(f"✅ Added {API_KEY_NAME} to {ENV_FILE}\n")
    else:
        console.print(f"ℹ️  Kept existing {API_KEY_NAME} in {ENV_FILE}\n")

    print_next_steps(api_key, widget_id)


def print_next_steps(api_key: str, widget_id: str):
    console.print("🎉 Setup complete!\n")
    console.print("Next steps:")
    console.print("")
    console.print("📋 In Cursor, type:")
    console.print("   @integrate-vortex")
    console.print("")
    console.print("   Cursor will use your credentials and implement Vortex!\n")
    # Credentials are user text; never parse them as rich markup
    console.print(f"Your API key: {api_key[:KEY_ECHO_LENGTH]}...", markup=False)
    console.print(f"Your widget ID: {widget_id}\n", markup=False)
    console.print("💡 Tip: Cursor already has your API key and widget ID.")
    console.print("   You can just focus on answering questions about your codebase.\n")
