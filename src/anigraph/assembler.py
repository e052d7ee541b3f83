"""Request assembly for AniList GraphQL documents.

``assemble`` is a pure function: it joins the fragments of one or more
QuerySpecs inside a single operation block, declares the variables they use
and binds the user selector. Nothing is sent from here.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from anigraph.errors import InvalidIdentifierError, InvalidOptionsError
from anigraph.models import QuerySpec, RequestDocument, UserIdentifier
from anigraph.utils.debug import debug


def _check_compatible(specs: Sequence[QuerySpec]) -> QuerySpec:
    if not specs:
        raise ValueError("At least one QuerySpec is required")
    first = specs[0]
    for spec in specs[1:]:
        if (
            spec.root != first.root
            or spec.operation != first.operation
            or spec.selector_at_root != first.selector_at_root
            or spec.root_arguments != first.root_arguments
        ):
            raise ValueError(
                f"QuerySpec {spec.name!r} cannot share a document with {first.name!r}"
            )
    return first


def _check_identifier(
    specs: Sequence[QuerySpec], identifier: UserIdentifier | None
) -> None:
    for spec in specs:
        if not spec.accepts:
            if identifier is not None:
                raise InvalidIdentifierError(
                    identifier.value, expected=f"no identifier for {spec.name}"
                )
            continue
        if identifier is None or identifier.kind not in spec.accepts:
            kinds = " or ".join(sorted(kind.value for kind in spec.accepts))
            raise InvalidIdentifierError(
                None if identifier is None else identifier.value,
                expected=f"a user {kinds} for {spec.name}",
            )


def assemble(
    specs: Sequence[QuerySpec],
    identifier: UserIdentifier | None = None,
    variables: Mapping[str, Any] | None = None,
) -> RequestDocument:
    """Build a GraphQL request document from query templates.

    Args:
        specs: Templates to combine, in the order their fields should appear.
            All must share a root field and operation type.
        identifier: The user selector, or None for viewer-scoped templates.
        variables: Caller-supplied values for variables the templates declare.

    Returns:
        The query text and the variables to send with it.

    Raises:
        InvalidIdentifierError: If the identifier is missing, of the wrong
            kind, or given to a template that takes none.
        InvalidOptionsError: If *variables* contains undeclared names.
        ValueError: If *specs* is empty, incompatible, or a required variable
            is left unbound.
    """
    first = _check_compatible(specs)
    _check_identifier(specs, identifier)

    declared: dict[str, str] = {}
    bound: dict[str, Any] = {}
    required: set[str] = set()
    for spec in specs:
        declared.update(spec.variables)
        bound.update(spec.defaults)
        required |= spec.required_variables

    if variables:
        unknown = sorted(set(variables) - set(declared))
        if unknown:
            raise InvalidOptionsError(
                f"Unknown variables for {first.name}: {', '.join(unknown)}", unknown
            )
        bound.update(variables)

    missing = required - set(bound)
    if missing:
        raise ValueError(f"Unbound required variables: {', '.join(sorted(missing))}")

    declarations: list[str] = []
    arguments: list[str] = []
    if identifier is not None:
        declarations.append(f"${identifier.variable}: {identifier.graphql_type}")
        bound[identifier.variable] = identifier.value
        if first.selector_at_root:
            arguments.append(f"{identifier.variable}: ${identifier.variable}")
    declarations.extend(f"${name}: {kind}" for name, kind in declared.items())
    arguments.extend(f"{name}: ${name}" for name in first.root_arguments)

    header = first.operation
    if declarations:
        header += f" ({', '.join(declarations)})"
    root = first.root
    if arguments:
        root += f"({', '.join(arguments)})"
    body = " ".join(spec.fragment.strip() for spec in specs)

    query = f"{header} {{ {root} {{ {body} }} }}"
    debug(f"Assembled {first.operation} {first.root} from {[s.name for s in specs]}")
    return RequestDocument(query=query, variables=bound)
