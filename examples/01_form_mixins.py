#!/usr/bin/env python
"""Example 01: Composing a form from mixins.

A form object does not implement validation or submission itself. Both
behaviors live in mixins registered under a name and are attached to the form
when it is created.

This example demonstrates:
1. Registering mixins, with and without a capability protocol
2. Injecting them into a host object
3. Extending a registered mixin before injection
4. What happens when a name is missing
"""

from __future__ import annotations

from typing import Dict, List, Protocol, runtime_checkable

from mixinject import MixinLookupError, MixinRegistry, subclass_with

# =============================================================================
# Part 1: Registering mixins
# =============================================================================

print("=" * 60)
print("Part 1: Registering mixins")
print("=" * 60)

registry = MixinRegistry()


@runtime_checkable
class Validating(Protocol):
    def validate(self, data: Dict[str, str]) -> bool: ...


@registry.mixin("validation", protocol=Validating)
class RequiredFields:
    """Reject forms with empty fields."""

    def __init__(self):
        self.errors: List[str] = []

    def validate(self, data: Dict[str, str]) -> bool:
        self.errors = [key for key, value in data.items() if not value]
        return not self.errors


@registry.mixin("submit")
class Outbox:
    """Collect submitted forms."""

    def __init__(self):
        self.sent: List[Dict[str, str]] = []

    def submit(self, data: Dict[str, str]) -> None:
        self.sent.append(data)


print(f"Registered: {list(registry)}")

# =============================================================================
# Part 2: Injecting into a host
# =============================================================================

print("\n" + "=" * 60)
print("Part 2: Injecting into a host")
print("=" * 60)


class SignupForm:
    def __init__(self, registry: MixinRegistry):
        registry.inject(["validation", "submit"], self)

    def send(self, data: Dict[str, str]) -> bool:
        if not self.validation.validate(data):
            return False
        self.submit.submit(data)
        return True


form = SignupForm(registry)
print(f"send(empty email) -> {form.send({'name': 'ada', 'email': ''})}")
print(f"errors            -> {form.validation.errors}")
print(f"send(complete)    -> {form.send({'name': 'ada', 'email': 'ada@x'})}")
print(f"outbox            -> {form.submit.sent}")

# =============================================================================
# Part 3: Extending a mixin
# =============================================================================

print("\n" + "=" * 60)
print("Part 3: Extending a mixin")
print("=" * 60)


class EmailCheck:
    def validate(self, data: Dict[str, str]) -> bool:
        valid = super().validate(data)
        if "@" not in data.get("email", "@"):
            self.errors.append("email")
            valid = False
        return valid


registry.extend("validation", subclass_with(EmailCheck))
form = SignupForm(registry)
print(f"send(bad email) -> {form.send({'name': 'ada', 'email': 'nope'})}")
print(f"errors          -> {form.validation.errors}")

# =============================================================================
# Part 4: Missing mixins
# =============================================================================

print("\n" + "=" * 60)
print("Part 4: Missing mixins")
print("=" * 60)

try:
    registry.inject(["validation", "rendering"], form)
except MixinLookupError as exc:
    print(exc)
