"""Simulated sign-in.

There is no real OAuth exchange here: the provider fabricates a fixed user
after a short delay, the way the product demo behaves. The signed-in user is
kept in a small JSON file so it survives restarts.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel

from logspark.models import AuthProvider, User

MOCK_USERS: Dict[str, User] = {
    "github": User(
        id="gh_12345",
        name="Alex Rivera",
        username="arivera_dev",
        avatarUrl="https://api.dicebear.com/7.x/avataaars/svg?seed=Alex",
        provider="github",
    ),
    "google": User(
        id="goog_67890",
        name="Alex Rivera",
        username="alex.rivera@gmail.com",
        avatarUrl="https://api.dicebear.com/7.x/avataaars/svg?seed=GoogleAlex",
        provider="google",
    ),
}

# Seconds the demo popup stays open
SIGN_IN_DELAYS = {"github": 2.0, "google": 1.5}


class PendingSignIn(BaseModel):
    provider: AuthProvider
    started_at: datetime


class AuthSession(BaseModel):
    user: User
    signed_in_at: datetime


class SignInProvider(ABC):
    @abstractmethod
    def begin_sign_in(self, provider: str) -> PendingSignIn:
        ...

    @abstractmethod
    async def complete_sign_in(self, pending: PendingSignIn) -> AuthSession:
        ...


class MockSignInProvider(SignInProvider):
    """Pretends to run a provider popup and returns a canned user"""

    def __init__(self, delays: Optional[Dict[str, float]] = None):
        self.delays = SIGN_IN_DELAYS if delays is None else delays

    def begin_sign_in(self, provider: str) -> PendingSignIn:
        if provider not in MOCK_USERS:
            raise ValueError(f"Unsupported sign-in provider: {provider}")
        print(f"🔐 Connecting to {provider}...")
        return PendingSignIn(provider=provider, started_at=datetime.now(timezone.utc))

    async def complete_sign_in(self, pending: PendingSignIn) -> AuthSession:
        delay = self.delays.get(pending.provider, 0)
        if delay:
            await asyncio.sleep(delay)

        user = MOCK_USERS[pending.provider]
        print(f"✅ Signed in as {user.username} via {pending.provider}")
        return AuthSession(user=user, signed_in_at=datetime.now(timezone.utc))


class SessionStore:
    """Keeps the current user on disk, like a browser's local storage"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[User]:
        if not self.path.exists():
            return None
        try:
            return User.model_validate(json.loads(self.path.read_text(encoding="utf-8")))
        except (OSError, ValueError) as e:
            print(f"⚠ Ignoring unreadable session file {self.path}: {str(e)}")
            return None

    def save(self, user: User) -> None:
        self.path.write_text(user.model_dump_json(), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
