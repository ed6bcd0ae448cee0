from typing import Optional

from pydantic_ai.direct import model_request
from pydantic_ai.messages import ModelRequest, UserPromptPart
from pydantic_ai.models import Model, ModelRequestParameters
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.output import OutputObjectDefinition
from pydantic_ai.providers.google import GoogleProvider

from logspark.config import Settings
from logspark.errors import ConfigurationError, TransportError
from logspark.models import ChangelogInput, GeneratedChangelog
from logspark.prompts import CHANGELOG_SCHEMA, build_prompt
from logspark.utils import parse_changelog_response

CHANGELOG_OUTPUT = OutputObjectDefinition(
    json_schema=CHANGELOG_SCHEMA,
    name="changelog",
    description="The same changelog rendered as Markdown, HTML and plain text",
)


class ChangelogGenerator:
    """Turns release notes into a formatted changelog using Gemini"""

    def __init__(self, settings: Settings, model: Optional[Model] = None):
        self.settings = settings
        self.model = model

    def _get_model(self) -> Model:
        if not self.settings.google_api_key:
            raise ConfigurationError("GOOGLE_API_KEY is not configured")

        if self.model is not None:
            return self.model

        provider = GoogleProvider(api_key=self.settings.google_api_key)
        return GoogleModel(self.settings.model_name, provider=provider)

    async def generate(self, changelog_input: ChangelogInput) -> GeneratedChangelog:
        """Generate Markdown, HTML and plain text for one release"""

        model = self._get_model()
        prompt = build_prompt(changelog_input)

        print(f"🤖 Generating changelog {changelog_input.version} ({changelog_input.template})")

        # Single request: no retries, no timeout override
        try:
            response = await model_request(
                model,
                [ModelRequest(parts=[UserPromptPart(content=prompt)])],
                model_request_parameters=ModelRequestParameters(
                    output_mode="native",
                    output_object=CHANGELOG_OUTPUT,
                ),
            )
        except Exception as e:
            print(f"❌ Generation request failed: {str(e)}")
            raise TransportError(f"Generation request failed: {str(e)}") from e

        response_text = response.text
        print(f"📄 LLM Response length: {len(response_text or '')} chars")

        changelog = parse_changelog_response(response_text)
        print(f"✅ Changelog {changelog_input.version} generated")
        return changelog
