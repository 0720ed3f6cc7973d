import pytest


SETTINGS_ENV_VARS = (
    "RESTOLINKS_CLOUDINARY_CLOUD_NAME",
    "CLOUDINARY_CLOUD_NAME",
    "RESTOLINKS_PLACEHOLDER_IMAGE",
    "RESTOLINKS_IMAGE_QUALITY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of settings lookups."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
