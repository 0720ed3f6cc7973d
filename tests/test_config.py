import pytest

from restolinks.config import get_settings, get_placeholder_image, DEFAULT_PLACEHOLDER_IMAGE
from restolinks.exceptions import ConfigurationError, RestolinksError


def test_defaults():
    settings = get_settings()

    assert settings.cloudinary_cloud_name is None
    assert settings.placeholder_image == DEFAULT_PLACEHOLDER_IMAGE
    assert settings.image_quality == 80


def test_prefixed_cloud_name_wins(monkeypatch):
    monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", "generic")
    monkeypatch.setenv("RESTOLINKS_CLOUDINARY_CLOUD_NAME", "restolinks")

    assert get_settings().cloudinary_cloud_name == "restolinks"


def test_overrides(monkeypatch):
    monkeypatch.setenv("RESTOLINKS_PLACEHOLDER_IMAGE", "/img/none.png")
    monkeypatch.setenv("RESTOLINKS_IMAGE_QUALITY", "65")
    settings = get_settings()

    assert settings.placeholder_image == "/img/none.png"
    assert settings.image_quality == 65


@pytest.mark.parametrize("value", ["high", "0", "101"])
def test_invalid_quality(monkeypatch, value):
    monkeypatch.setenv("RESTOLINKS_IMAGE_QUALITY", value)

    with pytest.raises(ConfigurationError):
        get_settings()


def test_configuration_error_is_restolinks_error():
    assert issubclass(ConfigurationError, RestolinksError)


def test_placeholder_getter_skips_quality_check(monkeypatch):
    monkeypatch.setenv("RESTOLINKS_IMAGE_QUALITY", "loud")
    monkeypatch.setenv("RESTOLINKS_PLACEHOLDER_IMAGE", "/img/none.png")

    assert get_placeholder_image() == "/img/none.png"
