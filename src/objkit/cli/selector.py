"""CLI command: objkit selector -- build a selector from part tokens."""

from __future__ import annotations

import sys

import click

from objkit.selector import Category, SelectorBuilder, SelectorError

_KINDS: dict[str, Category] = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "attribute": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}

# Token on the command line -> combinator rendered between selectors.
_COMBINATORS: dict[str, str] = {
    "+": "+",
    "~": "~",
    ">": ">",
    "descendant": " ",
}


def build_selector(tokens: list[str] | tuple[str, ...]) -> str:
    """Build a selector string from ``kind=value`` tokens and combinators.

    Compound selectors separated by combinator tokens are combined left to
    right. Raises ``click.UsageError`` for malformed tokens and
    ``SelectorError`` for ordering or cardinality violations.
    """
    groups: list[list[str]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if token in _COMBINATORS:
            combinators.append(_COMBINATORS[token])
            groups.append([])
        else:
            groups[-1].append(token)
    if any(not group for group in groups):
        raise click.UsageError("Each combinator needs a selector on both sides")

    builder = SelectorBuilder()
    handles = []
    for group in groups:
        handle = builder
        for token in group:
            kind, sep, value = token.partition("=")
            if not sep or kind not in _KINDS:
                raise click.UsageError(
                    f"Invalid part {token!r}; expected kind=value with kind in "
                    f"{', '.join(_KINDS)}"
                )
            handle = handle.add(_KINDS[kind], value)
        handles.append(handle)

    result = handles[0]
    for combinator, right in zip(combinators, handles[1:]):
        result = builder.combine(result, combinator, right)
    return result.stringify()


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a CSS selector from PARTS.

    Each part is kind=value (element, id, class, attr, pseudo-class,
    pseudo-element). The tokens +, ~, > and descendant join compound
    selectors.

    Example: objkit selector element=div id=main '>' element=p class=lead
    """
    try:
        click.echo(build_selector(parts))
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
