"""
Install CLI command.

Adds timeforged-mcp to the Claude Desktop configuration, pointing it at the
current Python interpreter and forwarding TF_* settings through the server env.
"""

import json
import sys
from pathlib import Path
from typing import Optional

from timeforged_mcp.settings import DEFAULT_SERVER_URL, Settings


CLAUDE_CONFIG_FILE = "claude_desktop_config.json"

# Claude Desktop data directory relative to home, per sys.platform
CLAUDE_DIRS = {
    "darwin": ("Library", "Application Support", "Claude"),
    "win32": ("AppData", "Roaming", "Claude"),
}
CLAUDE_DIR_DEFAULT = (".config", "Claude")


def get_claude_config_path(platform: Optional[str] = None) -> Path:
    """Claude Desktop config file for the given (or current) platform."""
    parts = CLAUDE_DIRS.get(platform or sys.platform, CLAUDE_DIR_DEFAULT)
    return Path.home().joinpath(*parts, CLAUDE_CONFIG_FILE)


def load_claude_config() -> dict:
    """
    Read the Claude Desktop config.

    A missing or unreadable file counts as empty, so installing never fails
    on a fresh machine.
    """
    try:
        return json.loads(get_claude_config_path().read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        print(f"⚠ Ignoring unreadable Claude Desktop config: {e}")
        return {}


def save_claude_config(config: dict) -> Path:
    """Write the config back, creating its directory. Returns the path written."""
    path = get_claude_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
    return path


def build_server_entry(settings: Settings) -> dict:
    """
    Server entry for mcpServers.

    Only non-default settings are written to env, so the API key is never
    stored when it is not set.
    """
    entry = {
        "command": sys.executable,
        "args": ["-m", "timeforged_mcp", "serve"],
    }

    env = {}
    if settings.server_url != DEFAULT_SERVER_URL:
        env["TF_SERVER_URL"] = settings.server_url
    if settings.has_api_key:
        env["TF_API_KEY"] = settings.api_key
    if env:
        entry["env"] = env

    return entry


def install_to_claude(
    name: str = "timeforged",
    force: bool = False,
    settings: Optional[Settings] = None,
) -> bool:
    """
    Add timeforged-mcp to Claude Desktop configuration.

    Merges into existing config, preserving all other servers.

    Returns True if installed, False if an entry exists and force is not set.
    """
    config = load_claude_config()
    servers = config.setdefault("mcpServers", {})

    if name in servers and not force:
        return False

    servers[name] = build_server_entry(settings or Settings())
    save_claude_config(config)
    return True


def uninstall_from_claude(name: str = "timeforged") -> bool:
    """Remove the server entry. Returns True if removed, False if not found."""
    config = load_claude_config()
    servers = config.get("mcpServers", {})

    if name not in servers:
        return False

    del servers[name]
    save_claude_config(config)
    return True


def run_install(
    uninstall: bool = False,
    force: bool = False,
    name: str = "timeforged",
) -> int:
    """
    Main install command entry point.

    Returns exit code (0 = success, 1 = error).
    """
    config_path = get_claude_config_path()

    if uninstall:
        if uninstall_from_claude(name):
            print(f"✓ Removed '{name}' from Claude Desktop")
            print(f"  Config: {config_path}")
            print("\nRestart Claude Desktop to apply changes.")
            return 0
        print(f"✗ '{name}' not found in Claude Desktop config")
        return 1

    try:
        settings = Settings()
        if not install_to_claude(name, force=force, settings=settings):
            print(f"✗ '{name}' already installed in Claude Desktop")
            print("  Use --force to overwrite")
            return 1
    except OSError as e:
        print(f"✗ Error: {e}")
        return 1

    print(f"✓ Installed '{name}' to Claude Desktop")
    print(f"  Config: {config_path}")
    print(f"  Python: {sys.executable}")
    print(f"  Server: {settings.server_url}")
    if not settings.has_api_key:
        print("\n⚠ TF_API_KEY not set. Requests will be sent without authentication.")
    print("\nRestart Claude Desktop to activate.")
    return 0
