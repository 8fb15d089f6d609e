"""
Vision Service

Product image analysis via the OpenAI vision API:
- ``image_to_label``: a short category label for the item in the photo,
  which callers pass through the category resolver
- ``tag_image``: dominant color name plus style and material tags

Images are normalised with Pillow (RGB, longest side capped, JPEG) before
upload. The model itself is an opaque collaborator; only the request shape
and response parsing live here.
"""

import base64
import io
import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from PIL import Image as PILImage, UnidentifiedImageError

from core.exceptions import ConfigurationError, MLServiceError, ValidationError
from core.services import BaseService
from storefront.config import config

from .taxonomy import all_categories


@dataclass
class ImageTags:
    """Descriptive tags for a product photo."""
    dominant_color_name: str = "unknown"
    style_tags: List[str] = field(default_factory=list)
    material_tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dominant_color_name": self.dominant_color_name,
            "style_tags": self.style_tags,
            "material_tags": self.material_tags,
        }


class VisionService(BaseService):
    """
    Image analysis service using the OpenAI vision API.

    Raises ``ConfigurationError`` when no API key is set and
    ``MLServiceError`` when the call fails or the reply cannot be parsed.
    """

    LABEL_PROMPT = """You are a fashion catalog classifier. Look at the main item in this image and name its product category.

Preferred categories:
{categories}

Rules:
- Reply with ONLY a JSON object: {{"category": "<category>"}}
- Use one of the preferred categories when one fits; otherwise a short plain noun such as "kurti" or "tote bag"
- Ignore backgrounds, models and watermarks"""

    TAG_PROMPT = """Analyze the clothing item in this image and generate catalog tags.

Reply with ONLY a JSON object:
{"dominant_color_name": "<color of the item itself>", "style_tags": ["..."], "material_tags": ["..."]}"""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = config.apis.openai_api_key if api_key is None else api_key
        self.model = model or config.vision.model
        self._client = None

    @property
    def client(self):
        """Lazy-load OpenAI client."""
        if self._client is None:
            if not self.api_key:
                raise ConfigurationError(
                    "OpenAI API key not configured", setting="OPENAI_API_KEY"
                )
            from openai import OpenAI
            self._client = OpenAI(api_key=self.api_key, timeout=config.vision.timeout)
        return self._client

    # ── Public API ──────────────────────────────────────────────

    def image_to_label(self, image_data: bytes) -> str:
        """Free-text category label for the item in ``image_data``."""
        prompt = self.LABEL_PROMPT.format(
            categories="\n".join(f"- {c}" for c in all_categories())
        )
        data = self._ask(prompt, image_data, max_tokens=50)
        label = data.get("category")
        if not isinstance(label, str):
            self.logger.warning(f"Vision label missing from response: {data}")
            return ""
        return label.strip()

    def tag_image(self, image_data: bytes) -> ImageTags:
        """Color, style and material tags for the item in ``image_data``."""
        data = self._ask(self.TAG_PROMPT, image_data, max_tokens=300)
        return ImageTags(
            dominant_color_name=str(data.get("dominant_color_name") or "unknown"),
            style_tags=self._tag_list(data.get("style_tags")),
            material_tags=self._tag_list(data.get("material_tags")),
        )

    # ── Internals ───────────────────────────────────────────────

    def _ask(self, prompt: str, image_data: bytes, max_tokens: int) -> Dict[str, Any]:
        image_content = self._encode_image_bytes(self.prepare_image(image_data))
        client = self.client
        request_id = self.generate_request_id()

        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            image_content,
                        ],
                    }
                ],
                max_tokens=max_tokens,
                temperature=0.1,
            )
            content = response.choices[0].message.content
        except Exception as e:
            self.logger.error(f"[{request_id}] Vision API call failed: {e}")
            raise MLServiceError(f"Vision API call failed: {type(e).__name__}") from e

        self.logger.info(f"[{request_id}] Vision API raw response (first 200 chars): {content[:200] if content else 'EMPTY'}")
        return self._parse_json(content)

    def _parse_json(self, content: Optional[str]) -> Dict[str, Any]:
        if not content or not content.strip():
            raise MLServiceError("Vision API returned empty response")

        json_str = content
        if "```json" in content:
            json_str = content.split("```json")[1].split("```")[0]
        elif "```" in content:
            parts = content.split("```")
            if len(parts) >= 3:
                json_str = parts[1]

        try:
            data = json.loads(json_str.strip())
        except json.JSONDecodeError:
            json_match = re.search(r'\{[^{}]*\}', content, re.DOTALL)
            if not json_match:
                raise MLServiceError("Vision API response was not JSON")
            try:
                data = json.loads(json_match.group())
            except json.JSONDecodeError as e:
                raise MLServiceError("Vision API response was not JSON") from e

        if not isinstance(data, dict):
            raise MLServiceError("Vision API response was not a JSON object")
        return data

    @staticmethod
    def _tag_list(value) -> List[str]:
        """Tags as a list of strings; a lone string counts as one tag."""
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return []
        return [str(t).strip() for t in value if isinstance(t, (str, int, float)) and str(t).strip()]

    @staticmethod
    def prepare_image(image_data: bytes) -> bytes:
        """Convert to RGB JPEG with the longest side capped."""
        try:
            pil_img = PILImage.open(io.BytesIO(image_data))
            pil_img.load()
        except (UnidentifiedImageError, OSError) as e:
            raise ValidationError("Uploaded file is not a readable image", field="image") from e

        max_side = config.vision.max_image_side
        if max(pil_img.size) > max_side:
            pil_img.thumbnail((max_side, max_side), PILImage.LANCZOS)

        # JPEG has no alpha channel
        if pil_img.mode in ('RGBA', 'P', 'LA'):
            background = PILImage.new('RGB', pil_img.size, (255, 255, 255))
            if pil_img.mode == 'P':
                pil_img = pil_img.convert('RGBA')
            background.paste(pil_img, mask=pil_img.split()[-1])
            pil_img = background
        elif pil_img.mode != 'RGB':
            pil_img = pil_img.convert('RGB')

        buf = io.BytesIO()
        pil_img.save(buf, format='JPEG', quality=85)
        return buf.getvalue()

    @staticmethod
    def _encode_image_bytes(image_data: bytes) -> Dict[str, Any]:
        base64_image = base64.b64encode(image_data).decode("utf-8")
        return {
            "type": "image_url",
            "image_url": {"url": f"data:image/jpeg;base64,{base64_image}"},
        }


# Singleton instance
vision_service = VisionService()
