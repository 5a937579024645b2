# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Advice installer — rewrites a named method slot with a composite callable.

Each installation reads whatever currently occupies the slot, closes over it
as ``previous`` together with the new advice, and writes the composite back
under the same name. Repeated installations nest, so the chain exists only
as closures:

* ``before`` wrappers run newest first, then the original.
* ``after`` wrappers run the original, then oldest first.
* ``around`` wrappers run newest first; each decides whether the inner
  chain runs at all.

Advice always receives the target object as its first positional argument.
Nothing is validated at installation time: a non-callable advice or an
absent ``previous`` fails with ``TypeError`` where the slot is called.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from withadvice.types import AfterAdvice, AroundAdvice, BeforeAdvice

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _preserving(previous: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Copy name/doc metadata of *previous* onto the composite, when it has any."""
    if callable(previous):
        return functools.wraps(previous)
    return lambda fn: fn


def _bind(target: Any, advice: Any) -> Callable[..., Any]:
    """Return *advice* with *target* fixed as its receiver."""

    @_preserving(advice)
    def bound(*args: Any, **kwargs: Any) -> Any:
        return advice(target, *args, **kwargs)

    return bound


class AdviceInstaller:
    """Installs before/after/around advice on the slots of one target object.

    Usage::

        installer = AdviceInstaller(account)
        installer.before("withdraw", lambda acct, amount: audit(acct, amount))
        installer.around("withdraw", retrying)
    """

    __slots__ = ("_target",)

    def __init__(self, target: Any) -> None:
        self._target = target

    @property
    def target(self) -> Any:
        return self._target

    def before(self, method: str, advice: BeforeAdvice) -> None:
        """Run *advice* ahead of whatever currently occupies *method*.

        With an empty slot, *advice* itself (bound to the target) becomes
        the method.
        """
        target = self._target
        previous = getattr(target, method, None)
        if previous is None:
            self._install("before", method, _bind(target, advice), previous)
            return

        @_preserving(previous)
        def composite(*args: Any, **kwargs: Any) -> None:
            advice(target, *args, **kwargs)
            previous(*args, **kwargs)

        self._install("before", method, composite, previous)

    def after(self, method: str, advice: AfterAdvice) -> None:
        """Run *advice* once whatever currently occupies *method* returns.

        With an empty slot, *advice* itself (bound to the target) becomes
        the method.
        """
        target = self._target
        previous = getattr(target, method, None)
        if previous is None:
            self._install("after", method, _bind(target, advice), previous)
            return

        @_preserving(previous)
        def composite(*args: Any, **kwargs: Any) -> None:
            previous(*args, **kwargs)
            advice(target, *args, **kwargs)

        self._install("after", method, composite, previous)

    def around(self, method: str, advice: AroundAdvice) -> None:
        """Hand control of *method* to *advice*.

        The advice is called as ``advice(target, previous, args, **kwargs)``:
        positional arguments arrive as one tuple, keyword arguments are
        passed through as keywords. Its return value is the composite's.
        ``previous`` is ``None`` when the slot was empty.
        """
        target = self._target
        previous = getattr(target, method, None)

        @_preserving(previous)
        def composite(*args: Any, **kwargs: Any) -> Any:
            return advice(target, previous, args, **kwargs)

        self._install("around", method, composite, previous)

    def _install(self, kind: str, method: str, composite: Callable[..., Any], previous: Any) -> None:
        setattr(self._target, method, composite)
        logger.debug(
            "Installed %s advice on %s.%s (previous=%s)",
            kind,
            type(self._target).__name__,
            method,
            "none" if previous is None else "wrapped",
        )


class WithAdvice:
    """Mixin giving every instance ``before``, ``after`` and ``around``.

    Advice installed through these methods lands on the instance, so other
    instances of the class keep their unwrapped methods.
    """

    def before(self, method: str, advice: BeforeAdvice) -> None:
        AdviceInstaller(self).before(method, advice)

    def after(self, method: str, advice: AfterAdvice) -> None:
        AdviceInstaller(self).after(method, advice)

    def around(self, method: str, advice: AroundAdvice) -> None:
        AdviceInstaller(self).around(method, advice)


def with_advice(target: T) -> T:
    """Attach ``before``, ``after`` and ``around`` to *target* and return it.

    Attaching again replaces the three operations but leaves every slot
    already wrapped as it is.
    """
    installer = AdviceInstaller(target)
    target.before = installer.before  # type: ignore[attr-defined]
    target.after = installer.after  # type: ignore[attr-defined]
    target.around = installer.around  # type: ignore[attr-defined]
    return target
