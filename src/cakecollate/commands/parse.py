"""Command group: check raw order field input against the validator."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cakecollate.commands._base import CakeGroup

if TYPE_CHECKING:
    from cakecollate.commands._context import AppContext


@click.group(
    cls=CakeGroup,
    examples="""\
  cakecollate parse name "Alex Yeoh"
  cakecollate parse date 24/12/2030
  cakecollate parse tags birthday urgent birthday
  cakecollate --json parse indices "3 1 2\"""",
)
def parse() -> None:
    """Validate raw order field input."""


@parse.command(examples='  cakecollate parse name "Alex Yeoh"')
@click.argument("value")
@click.pass_obj
def name(app: AppContext, value: str) -> None:
    """Validate a customer name."""
    app.emit(app.service.validate("name", value))


@parse.command(examples="  cakecollate parse phone 91234567")
@click.argument("value")
@click.pass_obj
def phone(app: AppContext, value: str) -> None:
    """Validate a phone number."""
    app.emit(app.service.validate("phone", value))


@parse.command(examples='  cakecollate parse address "Blk 30 Geylang Street 29, #06-40"')
@click.argument("value")
@click.pass_obj
def address(app: AppContext, value: str) -> None:
    """Validate a delivery address."""
    app.emit(app.service.validate("address", value))


@parse.command(examples="  cakecollate parse email alexyeoh@example.com")
@click.argument("value")
@click.pass_obj
def email(app: AppContext, value: str) -> None:
    """Validate an email address."""
    app.emit(app.service.validate("email", value))


@parse.command(examples='  cakecollate parse description "2 x Chocolate Cake"')
@click.argument("value")
@click.pass_obj
def description(app: AppContext, value: str) -> None:
    """Validate one order description line."""
    app.emit(app.service.validate("description", value))


@parse.command(
    examples='  cakecollate parse descriptions "Chocolate Cake" "Strawberry Tart"',
)
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def descriptions(app: AppContext, values: tuple[str, ...]) -> None:
    """Validate several order descriptions as a set."""
    app.emit(app.service.validate_many("descriptions", values))


@parse.command(examples="  cakecollate parse tag birthday")
@click.argument("value")
@click.pass_obj
def tag(app: AppContext, value: str) -> None:
    """Validate a tag name."""
    app.emit(app.service.validate("tag", value))


@parse.command(examples="  cakecollate parse tags birthday urgent")
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def tags(app: AppContext, values: tuple[str, ...]) -> None:
    """Validate several tags as a set."""
    app.emit(app.service.validate_many("tags", values))


@parse.command(
    examples="""\
  cakecollate parse date 24/12/2030
  cakecollate parse date "24 Dec 2030\"""",
)
@click.argument("value")
@click.pass_obj
def date(app: AppContext, value: str) -> None:
    """Validate a delivery date (today or later)."""
    app.emit(app.service.validate("date", value))


@parse.command(examples='  cakecollate parse item "Chocolate Cake"')
@click.argument("value")
@click.pass_obj
def item(app: AppContext, value: str) -> None:
    """Validate an order item type."""
    app.emit(app.service.validate("item", value))


@parse.command(examples="  cakecollate parse index 2")
@click.argument("value")
@click.pass_obj
def index(app: AppContext, value: str) -> None:
    """Validate a one-based list index."""
    app.emit(app.service.validate("index", value))


@parse.command(examples='  cakecollate parse indices "3 1 2"')
@click.argument("value")
@click.pass_obj
def indices(app: AppContext, value: str) -> None:
    """Validate a space-separated index list (printed highest first)."""
    app.emit(app.service.validate_indices(value))
