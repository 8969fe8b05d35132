from track_embed.models.credential import Credential

class CredentialStore:
    """Holds the one bearer credential shared by the whole process.

    Only `CredentialManager` writes here. Replacement is a single assignment of
    an immutable `Credential`, which is atomic on the event loop; a threaded
    deployment would need a lock around `set`.
    """

    def __init__(self):
        self._credential: Credential | None = None


    def get(self) -> Credential | None:
        return self._credential


    def set(self, credential: Credential):
        self._credential = credential
