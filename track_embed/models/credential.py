from dataclasses import dataclass

@dataclass(frozen=True)
class Credential:
    token: str
    expires_at: float


@dataclass(frozen=True)
class ApplicationIdentity:
    client_id: str | None
    client_secret: str | None

    @property
    def is_complete(self) -> bool:
        return bool(self.client_id and self.client_secret)
