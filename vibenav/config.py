import os
from pathlib import Path

from dotenv import load_dotenv

# API keys (GEMINI_API_KEY / OPENAI_API_KEY) are read by EnvironmentCredential
# at call time, after .env has been loaded here
load_dotenv()

# Deployment mode
PROVIDER = os.getenv("VIBENAV_PROVIDER", "gemini")  # "gemini" or "openai"
CREDENTIAL_MODE = os.getenv("VIBENAV_CREDENTIAL_MODE", "env")  # "env", "user" or "host"

# Models - blueprint prefers a pro-class model, probe uses the cheapest one
BLUEPRINT_MODEL = os.getenv("VIBENAV_BLUEPRINT_MODEL", "gemini-3-pro-preview")
PROBE_MODEL = os.getenv("VIBENAV_PROBE_MODEL", "gemini-3-flash-preview")
OPENAI_BLUEPRINT_MODEL = os.getenv("VIBENAV_OPENAI_BLUEPRINT_MODEL", "gpt-5.2")
OPENAI_PROBE_MODEL = os.getenv("VIBENAV_OPENAI_PROBE_MODEL", "gpt-5-mini")

# Credential vault (obfuscated local store)
VAULT_PATH = Path(os.getenv("VIBENAV_VAULT_PATH", str(Path.home() / ".vibenav" / "vault.json")))
VAULT_KEY = "_aimb_vault"

# Output language for generated copy
TARGET_LOCALE = os.getenv("VIBENAV_TARGET_LOCALE", "Korean")

# Transport timeout for a single provider call
REQUEST_TIMEOUT_SECONDS = int(os.getenv("VIBENAV_REQUEST_TIMEOUT_SECONDS", "120"))
