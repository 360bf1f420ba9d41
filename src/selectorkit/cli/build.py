"""CLI command: selectorkit build -- assemble a selector from parts."""

from __future__ import annotations

import sys

import click

from selectorkit.selector import COMBINATORS, SelectorError, css_selector_builder


def _parse_token(raw: str) -> tuple[str, str] | str:
    """Turn ``KIND=VALUE`` into a pair; combinators pass through."""
    if raw in COMBINATORS:
        return raw
    kind, sep, value = raw.partition("=")
    if not sep:
        raise click.BadParameter(
            f"{raw!r} is neither KIND=VALUE nor a combinator", param_hint="TOKENS"
        )
    return kind, value


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from ordered parts and combinators.

    Each token is KIND=VALUE, where KIND is one of element, id, class, attr,
    pseudo-class or pseudo-element, or a combinator: '+', '~', '>' or ' '.

    Example: selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    parts = [_parse_token(raw) for raw in tokens]

    try:
        fragment = css_selector_builder.build(parts)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(fragment.stringify())
