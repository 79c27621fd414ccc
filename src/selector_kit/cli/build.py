"""CLI command: selector-kit build -- assemble a selector from parts."""

from __future__ import annotations

import sys

import click

from selector_kit.config import SelectorKitConfig
from selector_kit.errors import SelectorKitError
from selector_kit.selector import Fragment, SelectorBuilder

# Part kind on the command line -> append method name.
_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def build_selector(parts: list[str], selector_builder: SelectorBuilder) -> Fragment:
    """Apply ``kind=value`` parts and bare combinators in the order given.

    Raises SelectorKitError for builder violations and ValueError for parts
    that cannot be interpreted.
    """
    compounds: list[Fragment] = []
    combinators: list[str] = []
    current: Fragment | None = None

    for part in parts:
        if "=" not in part:
            if current is None:
                raise ValueError(f"Combinator {part!r} has no selector on its left")
            compounds.append(current)
            combinators.append(part)
            current = None
            continue

        kind, value = part.split("=", 1)
        method = _METHODS.get(kind)
        if method is None:
            raise ValueError(
                f"Unknown part kind {kind!r} (expected one of: {', '.join(_METHODS)})"
            )
        target = selector_builder if current is None else current
        current = getattr(target, method)(value)

    if current is None:
        raise ValueError("Selector must end with a part, not a combinator")
    compounds.append(current)

    result = compounds[0]
    for combinator, right in zip(combinators, compounds[1:]):
        result = selector_builder.combine(result, combinator, right)
    return result


@click.command()
@click.argument("parts", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Only accept ' ', '+', '~' and '>' as combinators")
def build(parts: tuple[str, ...], strict: bool) -> None:
    """Build a selector from PARTS and print it.

    Each part is KIND=VALUE, where KIND is one of element, id, class, attr,
    pseudo-class or pseudo-element, or a bare combinator such as '>'.

    \b
    Example:
        selector-kit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    selector_builder = SelectorBuilder(SelectorKitConfig(strict_combinators=strict))
    try:
        fragment = build_selector(list(parts), selector_builder)
    except (SelectorKitError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(fragment.render())
