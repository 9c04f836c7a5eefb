"""Per-invocation CLI state shared by every command."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import click

from coffee_dms.domain.exceptions import DomainException, ValidationError
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository
from coffee_dms.infrastructure.bootstrap import bean_lot_repository
from coffee_dms.infrastructure.config import Settings


@dataclass
class CliState:
    """Settings for this run plus the repository, opened on first use."""

    settings: Settings
    _repository: BeanLotRepository | None = field(default=None, repr=False)

    def repository(self) -> BeanLotRepository:
        if self._repository is None:
            try:
                self._repository = bean_lot_repository(self.settings)
            except DomainException as exc:
                raise click.ClickException(str(exc))
            close = getattr(self._repository, "close", None)
            if close is not None:
                click.get_current_context().find_root().call_on_close(close)
        return self._repository


pass_state = click.make_pass_decorator(CliState)


def validated(parser: Callable[[str], object]):
    """Turn a domain field parser into a click option callback."""

    def callback(ctx: click.Context, param: click.Parameter, value: str | None):
        if value is None:
            return None
        try:
            return parser(value)
        except ValidationError as exc:
            raise click.BadParameter(str(exc), ctx=ctx, param=param)

    return callback


def value_proc(parser: Callable[[str], object]) -> Callable[[str], object]:
    """Turn a domain field parser into a ``click.prompt`` value_proc.

    click re-prompts when value_proc raises BadParameter, so one bad
    answer never discards the fields already entered.
    """

    def proc(value: str):
        try:
            return parser(value)
        except ValidationError as exc:
            raise click.BadParameter(str(exc))

    return proc
