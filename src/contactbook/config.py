"""
Settings from the environment (.env supported) and store wiring.
Variables: CONTACTBOOK_DATA_DIR, CONTACTBOOK_SLOT_KEY, CONTACTBOOK_PHONE_REGION.
"""

import os
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from dotenv import load_dotenv

from contactbook.application import DEFAULT_SLOT_KEY, ContactStore
from contactbook.infrastructure import FileSlot, format_phone

# Repo root: from src/contactbook/config.py go up three levels
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_DATA_DIR = "~/.contactbook"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    slot_key: str = DEFAULT_SLOT_KEY
    phone_region: str | None = None


def _load_env_file() -> None:
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def load_settings() -> Settings:
    """Build Settings from environment variables, loading .env first if present."""
    _load_env_file()
    data_dir = os.environ.get("CONTACTBOOK_DATA_DIR", "").strip() or DEFAULT_DATA_DIR
    slot_key = os.environ.get("CONTACTBOOK_SLOT_KEY", "").strip() or DEFAULT_SLOT_KEY
    region = os.environ.get("CONTACTBOOK_PHONE_REGION", "").strip().upper() or None
    return Settings(
        data_dir=Path(data_dir).expanduser(),
        slot_key=slot_key,
        phone_region=region,
    )


def build_store(settings: Settings) -> ContactStore:
    return ContactStore(FileSlot(settings.data_dir), key=settings.slot_key)


def build_phone_formatter(settings: Settings) -> Callable[[str], str | None]:
    """Formatter for ContactView.from_contact using the configured default region."""
    return partial(format_phone, default_region=settings.phone_region)
