"""
Tests for job description generation.

The model client is mocked; every failure mode must fall back to the
template rather than raise.
"""

import asyncio
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from core.integrations.descriptions import (
    DescriptionGenerator,
    template_description,
)

TITLE = "Backend Engineer"
COMPANY = "Acme"
STACK = ["Python", "FastAPI", "PostgreSQL", "Redis"]


def generator_with_client(generate_content, timeout: float = 5.0) -> DescriptionGenerator:
    generator = DescriptionGenerator(api_key="test-key", timeout=timeout)
    client = MagicMock()
    client.aio.models.generate_content = generate_content
    generator._client = client
    return generator


class TestTemplateDescription:
    """Test the deterministic fallback text."""

    def test_mentions_title_and_company(self):
        text = template_description(TITLE, COMPANY, STACK)
        assert text.startswith(f"Join our team at {COMPANY} as a {TITLE}!")

    def test_full_stack_in_intro(self):
        text = template_description(TITLE, COMPANY, STACK)
        assert "including Python, FastAPI, PostgreSQL, Redis." in text

    def test_first_three_technologies_in_requirements(self):
        text = template_description(TITLE, COMPANY, STACK)
        assert "• Strong experience with Python, FastAPI, PostgreSQL\n" in text

    def test_short_stack(self):
        text = template_description(TITLE, COMPANY, ["Go"])
        assert "• Strong experience with Go\n" in text

    def test_deterministic(self):
        assert template_description(TITLE, COMPANY, STACK) == template_description(
            TITLE, COMPANY, STACK
        )


class TestDescriptionGenerator:
    """Test model calls and fallbacks."""

    @pytest.mark.asyncio
    async def test_without_api_key_uses_template(self):
        generator = DescriptionGenerator(api_key=None)
        text = await generator.generate(TITLE, COMPANY, STACK)
        assert text == template_description(TITLE, COMPANY, STACK)

    @pytest.mark.asyncio
    async def test_returns_model_text(self):
        generate_content = AsyncMock(return_value=SimpleNamespace(text="  A great role.  "))
        generator = generator_with_client(generate_content)

        text = await generator.generate(TITLE, COMPANY, STACK)

        assert text == "A great role."
        kwargs = generate_content.call_args.kwargs
        assert kwargs["model"] == generator.model
        assert "Title: Backend Engineer" in kwargs["contents"]
        assert "Tech Stack: Python, FastAPI, PostgreSQL, Redis" in kwargs["contents"]

    @pytest.mark.asyncio
    async def test_model_error_uses_template(self):
        generator = generator_with_client(AsyncMock(side_effect=RuntimeError("quota exceeded")))
        text = await generator.generate(TITLE, COMPANY, STACK)
        assert text == template_description(TITLE, COMPANY, STACK)

    @pytest.mark.asyncio
    async def test_empty_answer_uses_template(self):
        generator = generator_with_client(AsyncMock(return_value=SimpleNamespace(text=None)))
        text = await generator.generate(TITLE, COMPANY, STACK)
        assert text == template_description(TITLE, COMPANY, STACK)

    @pytest.mark.asyncio
    async def test_timeout_uses_template(self):
        async def slow(**kwargs):
            await asyncio.sleep(5)
            return SimpleNamespace(text="too late")

        generator = generator_with_client(slow, timeout=0.01)
        text = await generator.generate(TITLE, COMPANY, STACK)
        assert text == template_description(TITLE, COMPANY, STACK)
