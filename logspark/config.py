import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_REPO_LIMIT = 12


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip().replace("\n", "")
    return value or None


class Settings(BaseModel):
    """Process configuration, built once and handed to each component"""

    google_api_key: Optional[str] = None
    model_name: str = DEFAULT_MODEL
    github_api_url: str = "https://api.github.com"
    github_username: str = "google"
    repo_limit: int = DEFAULT_REPO_LIMIT
    invalid_repo_limit: Optional[str] = None
    session_file: str = ".logspark_user.json"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment (and a .env file if present)"""
        load_dotenv()

        raw_limit = _clean(os.getenv("LOGSPARK_REPO_LIMIT"))
        repo_limit, invalid_repo_limit = DEFAULT_REPO_LIMIT, None
        if raw_limit is not None:
            try:
                repo_limit = int(raw_limit)
            except ValueError:
                invalid_repo_limit = raw_limit

        return cls(
            google_api_key=_clean(os.getenv("GOOGLE_API_KEY")),
            model_name=_clean(os.getenv("LOGSPARK_MODEL")) or DEFAULT_MODEL,
            github_api_url=_clean(os.getenv("GITHUB_API_URL")) or "https://api.github.com",
            github_username=_clean(os.getenv("GITHUB_USERNAME")) or "google",
            repo_limit=repo_limit,
            invalid_repo_limit=invalid_repo_limit,
            session_file=_clean(os.getenv("LOGSPARK_SESSION_FILE")) or ".logspark_user.json",
        )

    def warnings(self) -> List[str]:
        """Configuration problems worth reporting at startup"""
        problems = []
        if not self.google_api_key:
            problems.append("GOOGLE_API_KEY not set (required for changelog generation)")
        if self.invalid_repo_limit is not None:
            problems.append(
                f"LOGSPARK_REPO_LIMIT must be a number, got {self.invalid_repo_limit!r}; using {self.repo_limit}"
            )
        if self.repo_limit < 1:
            problems.append(f"LOGSPARK_REPO_LIMIT must be positive, got {self.repo_limit}")
        return problems
