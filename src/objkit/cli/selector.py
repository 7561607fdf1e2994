"""CLI command: objkit selector -- render a compound selector."""

from __future__ import annotations

import click

from objkit.selector import SimpleSelector


@click.command()
@click.option("--element", "element_name", default=None, help="Type selector, e.g. div")
@click.option("--id", "id_name", default=None, help="Id selector without '#'")
@click.option("--class", "class_names", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attribute", default=None, help="Attribute clause without brackets")
@click.option(
    "--pseudo-class", "pseudo_class_names", multiple=True, help="Pseudo-class (repeatable)"
)
@click.option("--pseudo-element", "pseudo_element_name", default=None, help="Pseudo-element")
def selector(
    element_name: str | None,
    id_name: str | None,
    class_names: tuple[str, ...],
    attribute: str | None,
    pseudo_class_names: tuple[str, ...],
    pseudo_element_name: str | None,
) -> None:
    """Render a compound selector from its fragments.

    Fragments are applied in grammar order regardless of the order the
    options are given in.
    """
    sel = SimpleSelector()
    if element_name is not None:
        sel.element(element_name)
    if id_name is not None:
        sel.id(id_name)
    for name in class_names:
        sel.class_(name)
    if attribute is not None:
        sel.attr(attribute)
    for name in pseudo_class_names:
        sel.pseudo_class(name)
    if pseudo_element_name is not None:
        sel.pseudo_element(pseudo_element_name)

    if not sel.populated():
        raise click.UsageError("Give at least one selector fragment.")

    click.echo(sel.stringify())
