"""Tests for GraphQL document assembly.

Covers identifier binding, fragment ordering, fixed variables, viewer-scoped
documents and the mutation variable checks. No network access is involved.
"""

import pytest

from anigraph.assembler import assemble
from anigraph.errors import InvalidIdentifierError, InvalidOptionsError
from anigraph.models import QuerySpec, to_identifier
from anigraph.queries import (
    RECENT_ACTIVITY,
    REGISTRY,
    USER_PROFILE,
    USER_STATS,
    USER_UPDATE,
    VIEWER_PROFILE,
)


@pytest.mark.parametrize("user", [12345, "someUsername"])
@pytest.mark.parametrize(
    "specs", [[USER_PROFILE], [USER_STATS], [USER_PROFILE, USER_STATS]]
)
def test_variable_keys_are_required_plus_selector(specs, user) -> None:
    identifier = to_identifier(user)
    document = assemble(specs, identifier)
    required = set().union(*(spec.required_variables for spec in specs))
    assert set(document.variables) == required | {identifier.variable}


def test_numeric_identifier_binds_only_id() -> None:
    document = assemble([USER_PROFILE], to_identifier(12345))
    assert document.variables == {"id": 12345}
    assert "User(id: $id)" in document.query
    assert "$id: Int" in document.query
    assert "$name" not in document.query


def test_name_identifier_binds_only_name() -> None:
    document = assemble([USER_PROFILE], to_identifier("someUsername"))
    assert document.variables == {"name": "someUsername"}
    assert "User(name: $name)" in document.query
    assert "$name: String" in document.query
    assert "$id" not in document.query


def test_fragments_keep_input_order() -> None:
    document = assemble([USER_PROFILE, USER_STATS], to_identifier(1))
    assert document.query.index("bannerImage") < document.query.index("statistics")
    reversed_doc = assemble([USER_STATS, USER_PROFILE], to_identifier(1))
    assert reversed_doc.query.index("statistics") < reversed_doc.query.index("bannerImage")


def test_document_is_single_balanced_block() -> None:
    document = assemble([USER_PROFILE, USER_STATS], to_identifier(1))
    assert document.query.startswith("query ($id: Int) { User(id: $id) {")
    assert document.query.count("{") == document.query.count("}")
    assert document.query.count("User(") == 1


def test_recent_activity_fixed_page() -> None:
    document = assemble([RECENT_ACTIVITY], to_identifier(12345))
    assert document.variables == {"id": 12345, "page": 1, "perPage": 25}
    assert "Page(page: $page, perPage: $perPage)" in document.query
    assert "activities(userId: $id, sort: ID_DESC)" in document.query
    assert "Page(id:" not in document.query


def test_recent_activity_rejects_name() -> None:
    with pytest.raises(InvalidIdentifierError):
        assemble([RECENT_ACTIVITY], to_identifier("someUsername"))


def test_identifier_required_for_user_specs() -> None:
    with pytest.raises(InvalidIdentifierError):
        assemble([USER_PROFILE])


def test_viewer_profile_has_no_selector() -> None:
    document = assemble([VIEWER_PROFILE])
    assert document.variables == {}
    assert document.query.startswith("query { Viewer {")
    assert "$id" not in document.query
    assert "$name" not in document.query


def test_viewer_profile_rejects_identifier() -> None:
    with pytest.raises(InvalidIdentifierError):
        assemble([VIEWER_PROFILE], to_identifier(1))


def test_update_binds_only_given_options() -> None:
    document = assemble([USER_UPDATE], variables={"titleLanguage": "ENGLISH"})
    assert document.variables == {"titleLanguage": "ENGLISH"}
    assert document.query.startswith("mutation (")
    assert "$titleLanguage: UserTitleLanguage" in document.query
    assert "updateUser(" in document.query


def test_update_rejects_unknown_option() -> None:
    with pytest.raises(InvalidOptionsError) as exc_info:
        assemble([USER_UPDATE], variables={"favouriteColour": "blue"})
    assert exc_info.value.keys == ["favouriteColour"]


def test_empty_spec_list_rejected() -> None:
    with pytest.raises(ValueError):
        assemble([], to_identifier(1))


def test_incompatible_specs_rejected() -> None:
    with pytest.raises(ValueError):
        assemble([USER_PROFILE, RECENT_ACTIVITY], to_identifier(1))


def test_missing_required_variable_rejected() -> None:
    spec = QuerySpec(
        name="needs_page",
        root="Page",
        fragment="pageInfo { total }",
        variables={"page": "Int"},
        root_arguments=("page",),
        required_variables=frozenset({"page"}),
    )
    with pytest.raises(ValueError):
        assemble([spec])


def test_assemble_does_not_mutate_spec_defaults() -> None:
    assemble([RECENT_ACTIVITY], to_identifier(1))
    assert RECENT_ACTIVITY.defaults == {"page": 1, "perPage": 25}


def test_registry_lists_every_template() -> None:
    assert set(REGISTRY) == {
        "user_profile",
        "user_stats",
        "viewer_profile",
        "recent_activity",
        "user_update",
    }
