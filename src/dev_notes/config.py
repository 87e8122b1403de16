from pathlib import Path

from dotenv import load_dotenv

# Configuration lives under ~/.config, notes live directly under the home directory
CONFIG_ROOT = Path.home() / ".config" / "dev-notes"
LOG_DIR = CONFIG_ROOT / "logs"
DEFAULT_NOTES_DIR = Path.home() / "dev-notes"

# Load environment variables from global .env only
global_env = CONFIG_ROOT / ".env"
if global_env.exists():
    load_dotenv(global_env)


def ensure_dirs():
    """Ensure the config and log directories exist"""
    for d in [CONFIG_ROOT, LOG_DIR]:
        d.mkdir(parents=True, exist_ok=True)


def get_log_path(name: str) -> Path:
    """Get full path for a log file"""
    return LOG_DIR / f"{name}.log"
