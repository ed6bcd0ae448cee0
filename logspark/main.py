from pathlib import Path
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from logspark.auth import MockSignInProvider, SessionStore
from logspark.config import Settings
from logspark.content import PRICING_PLANS, TEMPLATES, VIEWS
from logspark.errors import ChangelogError
from logspark.github import GitHubRepositories, prefill_from_repository
from logspark.llm import ChangelogGenerator
from logspark.models import (
    ChangelogInput,
    GeneratedChangelog,
    PricingPlan,
    Repository,
    TemplateInfo,
    User,
)

NO_ENTRIES_MESSAGE = "Please add at least one change entry."
GENERATION_FAILED_MESSAGE = "AI generation failed. Please check your API key."

# Environment Configuration
settings = Settings.from_env()

app = FastAPI(title="LogSpark Changelog Server")

app.state.settings = settings
app.state.generator = ChangelogGenerator(settings)
app.state.repositories = GitHubRepositories(settings)
app.state.sign_in = MockSignInProvider()
app.state.sessions = SessionStore(Path(settings.session_file))
app.state.last_result = None


@app.on_event("startup")
async def startup_event():
    """Validate environment on startup"""
    print("Starting LogSpark Changelog Server...")
    print(f"📊 Model: {app.state.settings.model_name}")

    problems = app.state.settings.warnings()
    for problem in problems:
        print(f"⚠ WARNING: {problem}")
    if not problems:
        print("✓ Environment variables configured")

    print("✅ Server ready!")


# Request Models
class PrefillRequest(BaseModel):
    form: ChangelogInput
    repository: Repository


def current_user() -> User:
    user = app.state.sessions.load()
    if user is None:
        raise HTTPException(status_code=401, detail="Not signed in")
    return user


@app.get("/")
async def root():
    return {"message": "LogSpark Changelog Server", "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


@app.get("/api/templates", response_model=List[TemplateInfo])
async def list_templates():
    return TEMPLATES


@app.get("/api/pricing", response_model=List[PricingPlan])
async def list_pricing_plans():
    return PRICING_PLANS


@app.get("/api/views")
async def list_views():
    return {"views": VIEWS}


@app.get("/api/changelog/defaults", response_model=ChangelogInput)
async def changelog_defaults():
    return ChangelogInput.default()


@app.post("/api/changelog", response_model=GeneratedChangelog)
async def generate_changelog(request: ChangelogInput):
    """Main endpoint for changelog generation"""

    if not request.has_content():
        raise HTTPException(status_code=400, detail=NO_ENTRIES_MESSAGE)

    try:
        result = await app.state.generator.generate(request)
    except ChangelogError as e:
        print(f"❌ {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=502, detail=GENERATION_FAILED_MESSAGE) from e

    app.state.last_result = result
    return result


@app.get("/api/changelog/last", response_model=GeneratedChangelog)
async def last_changelog():
    if app.state.last_result is None:
        raise HTTPException(status_code=404, detail="No changelog generated yet")
    return app.state.last_result


@app.post("/api/auth/signout")
async def sign_out():
    app.state.sessions.clear()
    app.state.last_result = None
    return {"status": "signed_out"}


@app.post("/api/auth/{provider}", response_model=User)
async def sign_in(provider: str):
    """Run the simulated provider sign-in and remember the user"""
    try:
        pending = app.state.sign_in.begin_sign_in(provider)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    session = await app.state.sign_in.complete_sign_in(pending)
    app.state.sessions.save(session.user)
    return session.user


@app.get("/api/auth/me", response_model=User)
async def me():
    return current_user()


@app.get("/api/repositories", response_model=List[Repository])
async def list_repositories():
    current_user()
    return await app.state.repositories.list_repositories()


@app.post("/api/repositories/prefill", response_model=ChangelogInput)
async def prefill_changelog(request: PrefillRequest):
    return prefill_from_repository(request.form, request.repository)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
