from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ReleaseCategory = Literal["features", "fixes", "improvements", "breaking"]
TemplateType = Literal["standard", "marketing", "technical", "minimal"]
AppView = Literal[
    "home", "generator", "pricing", "privacy", "contact", "about", "disclaimer"
]
AuthProvider = Literal["github", "google"]


class ChangelogEntry(BaseModel):
    category: ReleaseCategory
    content: str = ""


class ChangelogInput(BaseModel):
    """Raw release notes as typed into the generator form"""

    version: str
    date: str
    template: TemplateType = "standard"
    entries: List[ChangelogEntry] = []

    @classmethod
    def default(cls) -> "ChangelogInput":
        """Form state the generator page starts with"""
        return cls(
            version="1.0.0",
            date=date.today().isoformat(),
            template="standard",
            entries=[
                ChangelogEntry(category="features"),
                ChangelogEntry(category="fixes"),
                ChangelogEntry(category="improvements"),
            ],
        )

    def filled_entries(self) -> List[ChangelogEntry]:
        return [entry for entry in self.entries if entry.content.strip()]

    def has_content(self) -> bool:
        return bool(self.filled_entries())


class GeneratedChangelog(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    markdown: str
    html: str
    plain_text: str = Field(alias="plainText")


class User(BaseModel):
    id: str
    name: str
    username: str
    avatarUrl: str
    provider: AuthProvider


class Repository(BaseModel):
    id: int
    name: str
    fullName: str
    description: Optional[str] = None
    stargazers_count: Optional[int] = None


class PricingPlan(BaseModel):
    id: str
    name: str
    price: str
    features: List[str]
    recommended: bool = False


class TemplateInfo(BaseModel):
    id: TemplateType
    name: str
    icon: str
    desc: str
