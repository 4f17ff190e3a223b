"""Job description generation with Google GenAI and a template fallback."""

import asyncio
import logging
from typing import Optional, Sequence

from google.genai import types

logger = logging.getLogger(__name__)


DESCRIPTION_PROMPT = """Generate a professional job description for the following position:

Title: {title}
Company: {company_name}
Tech Stack: {tech_stack}

Requirements:
- Write in a professional, engaging tone
- Include responsibilities, requirements, and benefits
- Keep it between 150-300 words
- Focus on the specific technologies mentioned
- Make it appealing to talented developers

Do not include salary information, application instructions, or company-specific details beyond the company name provided."""


def template_description(title: str, company_name: str, tech_stack: Sequence[str]) -> str:
    """
    Build a deterministic job description without calling a model.

    Args:
        title: Job title
        company_name: Hiring company
        tech_stack: Technologies for the role; the first three are listed as requirements

    Returns:
        Job description text
    """
    return f"""Join our team at {company_name} as a {title}! We're looking for a talented developer to work with our modern tech stack including {", ".join(tech_stack)}.

Key Responsibilities:
• Develop and maintain high-quality software applications
• Collaborate with cross-functional teams to deliver innovative solutions
• Write clean, maintainable, and efficient code
• Participate in code reviews and technical discussions
• Stay up-to-date with the latest technologies and best practices

Requirements:
• Strong experience with {", ".join(tech_stack[:3])}
• Excellent problem-solving and communication skills
• Experience with modern development practices and tools
• Ability to work in a fast-paced, collaborative environment

What We Offer:
• Competitive compensation package
• Flexible working arrangements
• Professional development opportunities
• Modern tech stack and tools
• Collaborative and inclusive work environment

Ready to take your career to the next level? We'd love to hear from you!"""


class DescriptionGenerator:
    """
    Generates job descriptions with a Gemini model.

    ``generate`` never raises: a missing API key, a model error, a timeout or
    an empty answer all fall back to ``template_description``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gemini-2.0-flash",
        timeout: float = 30.0,
    ):
        """
        Initialize the generator.

        Args:
            api_key: Google API key; without one only the template is used
            model: Gemini model name
            timeout: Seconds to wait for the model before falling back
        """
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = None

    def _get_client(self):
        """Get or create the Google GenAI client."""
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, title: str, company_name: str, tech_stack: Sequence[str]) -> str:
        if not self.api_key:
            logger.warning("Google API key not configured, using template description")
            return template_description(title, company_name, tech_stack)

        prompt = DESCRIPTION_PROMPT.format(
            title=title,
            company_name=company_name,
            tech_stack=", ".join(tech_stack),
        )

        try:
            client = self._get_client()
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        max_output_tokens=500,
                        temperature=0.7,
                    ),
                ),
                timeout=self.timeout,
            )
            generated = (response.text or "").strip()
        except asyncio.TimeoutError:
            logger.error(f"Description generation timed out after {self.timeout}s, using template")
            return template_description(title, company_name, tech_stack)
        except Exception as e:
            logger.error(f"Error generating job description with AI: {e}", exc_info=True)
            return template_description(title, company_name, tech_stack)

        if not generated:
            logger.warning("Model returned empty description, using template")
            return template_description(title, company_name, tech_stack)

        return generated
