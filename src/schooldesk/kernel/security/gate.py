"""Kernel security – requirement checks, gates and the ``@require_permission``
decorator.

:func:`check_requirement` is the one rule for turning a requirement as written
on a navigation item (``None``, a single token, or a collection of tokens)
into a yes/no answer. Navigation filtering, :func:`permission_gate` and
:func:`require_permission` all go through it.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Collection, Literal, TypeVar, Union

from schooldesk.kernel.errors import ForbiddenError
from schooldesk.kernel.security.access import AccessModel
from schooldesk.kernel.security.access_context import AccessContext

F = TypeVar("F", bound=Callable[..., Any])

Requirement = Union[str, Collection[str], None]
GateMode = Literal["any", "all"]

# An empty requirement collection means "no requirement": the item is open to
# everyone instead of being hidden from everyone.
EMPTY_REQUIREMENT_IS_OPEN: bool = True


def normalise_requirement(requirement: Requirement) -> str | tuple[str, ...] | None:
    """Return ``None``, a single token, or a tuple of tokens.

    Empty collections collapse to ``None`` when
    :data:`EMPTY_REQUIREMENT_IS_OPEN` is set.
    """
    if requirement is None or isinstance(requirement, str):
        return requirement
    tokens = tuple(requirement)
    if not tokens and EMPTY_REQUIREMENT_IS_OPEN:
        return None
    return tokens


def check_requirement(
    access: AccessModel,
    requirement: Requirement,
    mode: GateMode = "any",
) -> bool:
    """Return ``True`` when *access* satisfies *requirement*."""
    normalised = normalise_requirement(requirement)
    if normalised is None:
        return True
    if isinstance(normalised, str):
        return access.has_permission(normalised)
    if mode == "all":
        return access.has_all_permissions(normalised)
    return access.has_any_permission(normalised)


def permission_gate(
    access: AccessModel,
    requirement: Requirement,
    mode: GateMode = "any",
) -> bool:
    """Decide whether a gated fragment is rendered for *access*.

    A single token is checked directly; a collection uses any-of semantics
    unless *mode* is ``"all"``.
    """
    return check_requirement(access, requirement, mode)


def require_permission(requirement: Requirement, *, mode: GateMode = "any") -> Callable[[F], F]:
    """Decorator that enforces *requirement* on the current :class:`AccessContext`.

    Works on both async and sync callables. Raises ``UnauthorizedError`` when
    no access model is in context and ``ForbiddenError`` when the check fails.

    Example::

        @require_permission(PERMISSIONS.FINANCE_MANAGE)
        async def post_ledger_entry(cmd: PostEntry) -> None:
            ...
    """
    normalised = normalise_requirement(requirement)

    def _enforce() -> None:
        access = AccessContext.require()
        if not check_requirement(access, normalised, mode):
            raise ForbiddenError(
                f"missing permission {normalised!r}",
                permission=normalised,
            )

    def decorator(fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                _enforce()
                return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            _enforce()
            return fn(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "EMPTY_REQUIREMENT_IS_OPEN",
    "GateMode",
    "Requirement",
    "check_requirement",
    "normalise_requirement",
    "permission_gate",
    "require_permission",
]
