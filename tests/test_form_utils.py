from restolinks.form_utils import normalize_image_url, describe_image_link, apply_place_to_form
from restolinks.maps_utils import extract_google_maps_data
from restolinks.models import PlaceExtraction


class TestNormalizeImageUrl:
    def test_blank_input_uses_placeholder(self):
        assert normalize_image_url("") == "/placeholder-restaurant.jpg"
        assert normalize_image_url("   ") == "/placeholder-restaurant.jpg"
        assert normalize_image_url(None) == "/placeholder-restaurant.jpg"

    def test_placeholder_from_env(self, monkeypatch):
        monkeypatch.setenv("RESTOLINKS_PLACEHOLDER_IMAGE", "/static/no-photo.png")
        assert normalize_image_url("") == "/static/no-photo.png"

    def test_explicit_placeholder(self):
        assert normalize_image_url("", placeholder="/x.jpg") == "/x.jpg"

    def test_imgur_link_is_converted(self):
        assert normalize_image_url(" https://imgur.com/ABC123 ") == "https://i.imgur.com/ABC123l.jpg"

    def test_other_links_are_kept(self):
        url = "https://example.com/paella.jpg"
        assert normalize_image_url(url) == url


class TestDescribeImageLink:
    def test_imgur(self):
        link = describe_image_link("https://imgur.com/a/ABC123#XYZ9")

        assert link.provider == "imgur"
        assert link.image_id == "XYZ9"
        assert link.direct_url == "https://i.imgur.com/XYZ9l.jpg"
        assert link.converted is True

    def test_cloudinary_uses_quality(self):
        link = describe_image_link(
            "https://res.cloudinary.com/demo/image/upload/v1/sample.jpg", quality=55
        )

        assert link.provider == "cloudinary"
        assert link.image_id == "sample"
        assert link.direct_url == "https://res.cloudinary.com/demo/image/upload/f_auto,q_55/v1/sample.jpg"

    def test_cloudinary_quality_from_env(self, monkeypatch):
        monkeypatch.setenv("RESTOLINKS_IMAGE_QUALITY", "90")
        link = describe_image_link("https://res.cloudinary.com/demo/image/upload/sample.jpg")

        assert "/upload/f_auto,q_90/" in link.direct_url

    def test_unknown_provider(self):
        link = describe_image_link("https://example.com/paella.jpg")

        assert link.provider is None
        assert link.image_id is None
        assert link.converted is False


class TestApplyPlaceToForm:
    def test_keeps_previous_values_for_absent_fields(self):
        form = {"name": "Casa Lucio", "location": "", "description": "Huevos rotos"}
        url = "https://www.google.com/maps/@40.4125,-3.7086,17z"
        place = extract_google_maps_data(url)

        merged = apply_place_to_form(form, place)

        assert merged == {
            "name": "Casa Lucio",
            "location": "40.4125, -3.7086",
            "description": "Huevos rotos",
            "source_url": url,
        }

    def test_does_not_mutate_input(self):
        form = {"name": "Old"}
        apply_place_to_form(form, PlaceExtraction(source_url="https://maps.google.com", name="New"))

        assert form == {"name": "Old"}

    def test_overwrites_name(self):
        place = extract_google_maps_data(
            "https://www.google.com/maps/place/Restaurante+Bella+Italia/@41.3851,2.1734,15z"
        )
        merged = apply_place_to_form({"name": "Old"}, place)

        assert merged["name"] == "Restaurante Bella Italia"
        assert merged["location"] == "41.3851, 2.1734"


def test_blank_link_ignores_invalid_quality_setting(monkeypatch):
    monkeypatch.setenv("RESTOLINKS_IMAGE_QUALITY", "loud")

    assert normalize_image_url("") == "/placeholder-restaurant.jpg"
