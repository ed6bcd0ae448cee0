from typing import List, Optional

import httpx
from pydantic import ValidationError

from logspark.config import Settings
from logspark.models import ChangelogInput, Repository


class GitHubRepositories:
    """Reads public repository listings for the repository picker"""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = settings.github_api_url.rstrip("/")
        self.username = settings.github_username
        self.limit = settings.repo_limit
        self.transport = transport

    async def list_repositories(self, username: Optional[str] = None) -> List[Repository]:
        """List recently updated repositories, or nothing if GitHub is unavailable"""

        username = username or self.username
        url = f"{self.api_url}/users/{username}/repos"
        params = {"sort": "updated", "per_page": self.limit}

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(
                    url,
                    params=params,
                    headers={"Accept": "application/vnd.github+json"},
                    timeout=10,
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            print(f"⚠ Failed to fetch repositories for {username}: {str(e)}")
            return []

        if not isinstance(data, list):
            print(f"⚠ Unexpected repository listing for {username}: {type(data).__name__}")
            return []

        try:
            repositories = [
                Repository(
                    id=repo["id"],
                    name=repo["name"],
                    fullName=repo.get("full_name") or repo["name"],
                    description=repo.get("description"),
                    stargazers_count=repo.get("stargazers_count"),
                )
                for repo in data
                if isinstance(repo, dict) and "id" in repo and "name" in repo
            ]
        except ValidationError as e:
            print(f"⚠ Malformed repository listing for {username}: {str(e)}")
            return []

        print(f"✓ Fetched {len(repositories)} repositories for {username}")
        return repositories


def prefill_from_repository(changelog_input: ChangelogInput, repo: Repository) -> ChangelogInput:
    """Seed the features entry with starter notes for the chosen repository"""
    content = f"feat: sync data from {repo.name}\nfeat: update schema for {repo.name}"
    entries = [
        entry.model_copy(update={"content": content}) if entry.category == "features" else entry
        for entry in changelog_input.entries
    ]
    return changelog_input.model_copy(update={"entries": entries})
