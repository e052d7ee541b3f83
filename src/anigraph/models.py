"""Data models for AniList user requests.

This module defines the immutable values that flow through a request:
- UserIdentifier is the tagged union of the two ways AniList lets callers
  select a user (username or numeric id). It is built once at the boundary by
  to_identifier so downstream code never re-inspects raw input types.
- QuerySpec is a named GraphQL selection template plus the variables it
  declares. Specs are created at import time and shared read-only.
- RequestDocument is the query text and variables of a single call.
- AuthorizationState records whether the client holds an access token.

Design:
- All models are frozen pydantic models; nothing here is mutated after
  construction.
- ActivityType mirrors AniList's ActivityType enum so callers can tell the
  activity variants apart by their ``type`` field.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from anigraph.errors import InvalidIdentifierError


class IdentifierKind(str, Enum):
    """Which user selector an identifier binds to."""

    NAME = "name"
    ID = "id"


class UserIdentifier(BaseModel):
    """A validated reference to an AniList user."""

    model_config = ConfigDict(frozen=True)

    kind: IdentifierKind
    value: int | str

    @property
    def variable(self) -> str:
        """GraphQL variable (and argument) name for this identifier."""
        return self.kind.value

    @property
    def graphql_type(self) -> str:
        """GraphQL scalar type the variable is declared with."""
        return "Int" if self.kind is IdentifierKind.ID else "String"


def to_identifier(user: Any) -> UserIdentifier:
    """Build a UserIdentifier from a raw username or AniList id.

    Args:
        user: A non-empty username, an integer id, or an existing identifier.

    Returns:
        The tagged identifier.

    Raises:
        InvalidIdentifierError: If *user* is any other shape. ``bool`` is
            rejected even though it subclasses ``int``.
    """
    if isinstance(user, UserIdentifier):
        return user
    if isinstance(user, bool):
        raise InvalidIdentifierError(user)
    if isinstance(user, int):
        return UserIdentifier(kind=IdentifierKind.ID, value=user)
    if isinstance(user, str) and user.strip():
        return UserIdentifier(kind=IdentifierKind.NAME, value=user)
    raise InvalidIdentifierError(user)


class QuerySpec(BaseModel):
    """A named GraphQL selection template.

    ``accepts`` lists the identifier kinds the spec can be selected with; an
    empty set means the spec is scoped to the authorized viewer and takes no
    identifier. When ``selector_at_root`` is false the fragment references the
    selector variable itself instead of passing it to the root field.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    root: str
    fragment: str
    operation: Literal["query", "mutation"] = "query"
    accepts: frozenset[IdentifierKind] = frozenset()
    selector_at_root: bool = True
    variables: dict[str, str] = Field(default_factory=dict)
    """Declared non-selector variables, name -> GraphQL type."""
    root_arguments: tuple[str, ...] = ()
    defaults: dict[str, Any] = Field(default_factory=dict)
    required_variables: frozenset[str] = frozenset()

    def scoped(self, root: str, name: str) -> "QuerySpec":
        """Return a copy of this spec re-rooted to *root* with no selector."""
        return self.model_copy(
            update={"root": root, "name": name, "accepts": frozenset()}, deep=True
        )


class RequestDocument(BaseModel):
    """Query text plus variables for a single dispatch."""

    model_config = ConfigDict(frozen=True)

    query: str
    variables: dict[str, Any] = Field(default_factory=dict)


class AuthorizationState(BaseModel):
    """Presence (and opaque value) of an AniList access token."""

    model_config = ConfigDict(frozen=True)

    token: SecretStr | None = None

    @property
    def present(self) -> bool:
        """Whether an access token is held."""
        return bool(self.secret())

    def secret(self) -> str | None:
        """Return the raw token, or None when none is held."""
        if self.token is None:
            return None
        return self.token.get_secret_value() or None

    def __bool__(self) -> bool:
        return self.present


class ActivityType(str, Enum):
    """AniList activity types returned in the ``type`` field of an activity."""

    TEXT = "TEXT"
    ANIME_LIST = "ANIME_LIST"
    MANGA_LIST = "MANGA_LIST"
    MESSAGE = "MESSAGE"
    MEDIA_LIST = "MEDIA_LIST"

    @property
    def variant(self) -> str:
        """GraphQL object type this activity type is returned as."""
        if self is ActivityType.TEXT:
            return "TextActivity"
        if self is ActivityType.MESSAGE:
            return "MessageActivity"
        return "ListActivity"


def activity_variant(activity: dict[str, Any]) -> str:
    """Classify an activity returned by the feed by its ``type`` field.

    Raises:
        ValueError: If the activity carries no known type.
    """
    return ActivityType(activity.get("type")).variant
