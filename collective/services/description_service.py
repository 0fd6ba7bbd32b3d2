"""
Event description suggestions from the Gemini text generation API.

Never raises: a missing credential, an empty answer or a failed call all
come back as a user-facing string in place of the generated text.
"""

import logging
from typing import Optional

import httpx

from collective import config

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com"
EMPTY_RESPONSE_TEXT = "Could not generate a description, please try again."
ERROR_TEXT = (
    "An error occurred while generating the description. "
    "Please check the network connection or API key."
)

PROMPT_TEMPLATE = """
You write copy for a photography collective called "Green Forest".
Write an inviting call for participants for the photo shoot below.
Keep the tone fresh and natural, in line with the collective's name.

Theme: {title}
Location: {location}
Style / notes: {style_notes}

Requirements:
1. 100 to 150 words.
2. Include a few fitting emoji.
3. Warm but professional tone.
"""


def demo_description(title: str, location: str) -> str:
    return (
        f"[Demo mode] A wonderful shoot themed {title}, held at {location}. "
        "We look forward to seeing you there!"
    )


def build_prompt(title: str, location: str, style_notes: str) -> str:
    return PROMPT_TEMPLATE.format(
        title=title, location=location, style_notes=style_notes
    )


class DescriptionService:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = config.gemini_api_key() if api_key is None else api_key
        self.model = model or config.gemini_model()
        self.timeout = timeout if timeout is not None else config.description_timeout()
        self.transport = transport

    async def generate(self, title: str, location: str, style_notes: str = "") -> str:
        if not self.api_key:
            logger.warning("No API key configured, returning demo description")
            return demo_description(title, location)

        payload = {
            "contents": [
                {"parts": [{"text": build_prompt(title, location, style_notes)}]}
            ]
        }
        try:
            async with httpx.AsyncClient(
                base_url=GEMINI_BASE_URL,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.post(
                    f"/v1beta/models/{self.model}:generateContent",
                    params={"key": self.api_key},
                    json=payload,
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.error("Error generating description: %s", e)
            return ERROR_TEXT
        except ValueError as e:
            logger.error("Unreadable description response: %s", e)
            return ERROR_TEXT

        return extract_text(data) or EMPTY_RESPONSE_TEXT


def extract_text(data) -> str:
    """Concatenate the text parts of the first candidate"""
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return ""
    return "".join(part.get("text", "") for part in parts).strip()
