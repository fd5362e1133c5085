"""Login gate in front of the product management screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar, Union

from catalog_admin.utils.config_loader import GuardConfig

T = TypeVar("T")


@dataclass(frozen=True)
class Redirect:
    to: str


def private_route(element: T, logged_in_user: Any, login_path: str = "/login") -> Union[T, Redirect]:
    """Return ``element`` for a logged-in user, otherwise a redirect to ``login_path``."""
    return element if logged_in_user else Redirect(to=login_path)


def private_route_for(config: GuardConfig) -> Callable[[T, Any], Union[T, Redirect]]:
    """Bind ``private_route`` to the login path from the ``guard`` config section."""

    def guard(element: T, logged_in_user: Any) -> Union[T, Redirect]:
        return private_route(element, logged_in_user, login_path=config.login_path)

    return guard
