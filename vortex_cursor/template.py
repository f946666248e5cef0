import os
from typing import Dict, Optional
from vortex_cursor.config import (
    TEMPLATES_DIR, TEMPLATE_NAME, PROMPTS_DIR,
    API_KEY_PLACEHOLDER, WIDGET_ID_PLACEHOLDER
)


def render_template(content: str, values: Dict[str, str]) -> str:
    """Replaces every occurrence of each placeholder with its value, literally."""
    for placeholder, value in values.items():
        content = content.replace(placeholder, value)
    return content


def materialize_prompt(cwd: str, api_key: str, widget_id: str, template_path: Optional[str] = None) -> str:
    """
    Writes the customized Cursor prompt into <cwd>/.cursor/prompts.
    An existing prompt file is overwritten. Missing template or unwritable paths raise OSError.
    :return: Path of the written file.
    """
    template_path = template_path or os.path.join(TEMPLATES_DIR, TEMPLATE_NAME)
    target_dir = os.path.join(cwd, PROMPTS_DIR)
    os.makedirs(target_dir, exist_ok=True)

    with open(template_path, 'r', encoding='utf-8') as f:
        content = f.read()

    content = render_template(content, {
        API_KEY_PLACEHOLDER: api_key,
        WIDGET_ID_PLACEHOLDER: widget_id,
    })

    target_file = os.path.join(target_dir, TEMPLATE_NAME)
    with open(target_file, 'w', encoding='utf-8') as f:
        f.write(content)
    return target_file
