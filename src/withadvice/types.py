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
"""Advice callable signatures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

BeforeAdvice = Callable[..., Any]
"""``advice(receiver, *args, **kwargs)``, run ahead of the previous callable."""

AfterAdvice = Callable[..., Any]
"""``advice(receiver, *args, **kwargs)``, run once the previous callable returns."""

AroundAdvice = Callable[..., Any]
"""``advice(receiver, previous, args, **kwargs)``.

``previous`` is whatever occupied the slot at installation time, or ``None``
when the slot was empty. ``args`` is the tuple of positional arguments the
composite was called with; keyword arguments are passed as keywords. The
advice decides whether to call ``previous`` and returns the value the
composite hands back to its caller.
"""
