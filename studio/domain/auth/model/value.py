"""Value objects for the auth domain."""

from uuid import uuid4

from pydantic import RootModel, field_validator


class UserId(RootModel[str]):
    """Identifier of an authenticated user, as issued by the auth provider."""

    @field_validator("root")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("User id must not be blank")
        return v

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)


class RoleRequestId(RootModel[str]):
    """Unique identifier for a RoleRequest."""

    @classmethod
    def generate(cls) -> "RoleRequestId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)
