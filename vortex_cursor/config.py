import os

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
TEMPLATE_NAME = "integrate-vortex.md"

# Relative to the operator's working directory
PROMPTS_DIR = os.path.join(".cursor", "prompts")
ENV_FILE = ".env.local"

API_KEY_NAME = "VORTEX_API_KEY"
API_KEY_PLACEHOLDER = "{{VORTEX_API_KEY}}"
WIDGET_ID_PLACEHOLDER = "{{VORTEX_WIDGET_ID}}"
ENV_HEADER = "# Vortex Configuration"

API_KEYS_URL = "https://admin.vortexsoftware.com/members/api-keys"
ADMIN_URL = "https://admin.vortexsoftware.com"

USAGE = "Usage: vortex-cursor init"

# How much of the API key is echoed back at the end of setup
KEY_ECHO_LENGTH = 20
