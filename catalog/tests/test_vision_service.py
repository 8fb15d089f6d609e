"""
Tests for the vision service with the OpenAI client stubbed out.

Run with: python -m pytest catalog/tests/test_vision_service.py -v
"""

import io
import json
from types import SimpleNamespace
from unittest import mock

import pytest
from PIL import Image

from catalog.services.vision_service import ImageTags, VisionService
from core.exceptions import ConfigurationError, MLServiceError, ValidationError


def _reply(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def service():
    svc = VisionService(api_key="sk-test", model="test-vision")
    svc._client = mock.MagicMock()
    return svc


class TestImageToLabel:

    def test_returns_stripped_label(self, service, png_bytes):
        service._client.chat.completions.create.return_value = _reply('{"category": "  Kurti "}')
        assert service.image_to_label(png_bytes) == "Kurti"

        kwargs = service._client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-vision"
        prompt = kwargs["messages"][0]["content"][0]["text"]
        assert "- Tshirts" in prompt
        image_part = kwargs["messages"][0]["content"][1]
        assert image_part["image_url"]["url"].startswith("data:image/jpeg;base64,")

    def test_fenced_json(self, service, png_bytes):
        service._client.chat.completions.create.return_value = _reply(
            'Here you go:\n```json\n{"category": "Sarees"}\n```'
        )
        assert service.image_to_label(png_bytes) == "Sarees"

    def test_missing_label_is_empty(self, service, png_bytes):
        service._client.chat.completions.create.return_value = _reply('{"category": 5}')
        assert service.image_to_label(png_bytes) == ""

    def test_api_failure(self, service, png_bytes):
        service._client.chat.completions.create.side_effect = RuntimeError("connection reset")
        with pytest.raises(MLServiceError) as exc:
            service.image_to_label(png_bytes)
        assert exc.value.details["vendor"] == "openai"

    def test_reply_without_choices(self, service, png_bytes):
        service._client.chat.completions.create.return_value = SimpleNamespace(choices=[])
        with pytest.raises(MLServiceError):
            service.image_to_label(png_bytes)

    @pytest.mark.parametrize("content", ["", None, "no json here", "[1, 2]"])
    def test_unusable_reply(self, service, png_bytes, content):
        service._client.chat.completions.create.return_value = _reply(content)
        with pytest.raises(MLServiceError):
            service.image_to_label(png_bytes)


class TestTagImage:

    def test_parses_tags(self, service, png_bytes):
        service._client.chat.completions.create.return_value = _reply(
            'Result: {"dominant_color_name": "navy", "style_tags": ["casual"], "material_tags": ["denim"]}'
        )
        assert service.tag_image(png_bytes) == ImageTags("navy", ["casual"], ["denim"])

    def test_missing_fields_default(self, service, png_bytes):
        service._client.chat.completions.create.return_value = _reply("{}")
        assert service.tag_image(png_bytes) == ImageTags()

    def test_lone_string_tags_become_single_tags(self, service, png_bytes):
        service._client.chat.completions.create.return_value = _reply(
            '{"dominant_color_name": "white", "style_tags": "casual", "material_tags": "cotton"}'
        )
        tags = service.tag_image(png_bytes)
        assert tags.style_tags == ["casual"]
        assert tags.material_tags == ["cotton"]

    @pytest.mark.parametrize("value,expected", [
        (5, []),
        ({"style": "boho"}, []),
        (["boho", "", {"x": 1}, " retro "], ["boho", "retro"]),
        (None, []),
    ])
    def test_tag_shapes_are_coerced(self, service, png_bytes, value, expected):
        service._client.chat.completions.create.return_value = _reply(json.dumps({"style_tags": value}))
        assert service.tag_image(png_bytes).style_tags == expected


class TestClient:

    def test_missing_key_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc:
            VisionService(api_key="").client
        assert exc.value.details["setting"] == "OPENAI_API_KEY"


class TestPrepareImage:

    def test_downscales_and_flattens(self):
        buf = io.BytesIO()
        Image.new("RGBA", (1200, 600), (0, 0, 255, 128)).save(buf, format="PNG")

        out = Image.open(io.BytesIO(VisionService.prepare_image(buf.getvalue())))
        assert out.format == "JPEG"
        assert out.mode == "RGB"
        assert out.size == (800, 400)

    def test_small_images_keep_their_size(self, png_bytes):
        out = Image.open(io.BytesIO(VisionService.prepare_image(png_bytes)))
        assert out.size == (64, 32)

    def test_unreadable_bytes(self):
        with pytest.raises(ValidationError):
            VisionService.prepare_image(b"definitely not an image")
