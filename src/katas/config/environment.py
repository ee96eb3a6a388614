"""
Environment Variable Handling.

Loads .env files into os.environ using python-dotenv so that
${VAR} references and KATAS_* overrides can see them.
"""

from pathlib import Path

from dotenv import load_dotenv

# Track whether dotenv has been loaded
_dotenv_loaded: bool = False


def ensure_dotenv_loaded(env_file: str = ".env") -> bool:
    """Ensure .env file is loaded into os.environ.

    Loading happens at most once per process until reset_environment()
    is called.

    Args:
        env_file: Path to .env file (relative or absolute)

    Returns:
        True if a .env file is loaded, False otherwise
    """
    global _dotenv_loaded

    if _dotenv_loaded:
        return True

    env_paths = [
        Path(env_file),
        Path.cwd() / env_file,
    ]

    _dotenv_loaded = True
    for env_path in env_paths:
        if env_path.exists():
            load_dotenv(env_path, override=True)
            return True

    # No .env file found, that's okay - use defaults
    return False


def load_environment(env_file: str = ".env") -> bool:
    """Load environment variables for configuration.

    Args:
        env_file: Path to .env file

    Returns:
        True if a .env file is loaded
    """
    return ensure_dotenv_loaded(env_file)


def reset_environment() -> None:
    """Reset the loaded flag so the next load reads .env again.

    Useful for testing or reloading after .env changes.
    """
    global _dotenv_loaded
    _dotenv_loaded = False
