import os

from archive_migration.constants import (
    DEFAULT_ARCHIVE_REPO,
    DEFAULT_EASYCONFIGS_REPO,
    ENV_ARCHIVE_REPO,
    ENV_EASYCONFIGS_REPO,
    ENV_OVERRIDE_FLAG,
)


def get_repo_config() -> tuple[str, str]:
    """Return repository paths after loading environment variables.

    Returns:
        Tuple of (easyconfigs_repo, archive_repo) loaded from environment
    """
    from dotenv import find_dotenv, load_dotenv

    # Load .env first, but allow real environment variables to override values from file
    # Use find_dotenv so execution from another directory still picks up the project .env
    try:
        env_path = find_dotenv(usecwd=True) or find_dotenv()
    except Exception:
        env_path = ""
    load_dotenv(dotenv_path=env_path if env_path else None, override=False)
    if os.getenv(ENV_OVERRIDE_FLAG, "").lower() in {"1", "true", "yes"}:
        load_dotenv(dotenv_path=env_path if env_path else None, override=True)

    # Treat empty strings as absent
    easyconfigs_repo = os.getenv(ENV_EASYCONFIGS_REPO) or DEFAULT_EASYCONFIGS_REPO
    archive_repo = os.getenv(ENV_ARCHIVE_REPO) or DEFAULT_ARCHIVE_REPO
    return easyconfigs_repo, archive_repo
