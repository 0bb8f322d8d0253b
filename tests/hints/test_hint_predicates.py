"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-18
Description: Tests for the predicates querying runtime hints.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from metahints.hints import ExecutableMode, MemberCategory, RuntimeHints, RuntimeHintsPredicates
from metahints.meta.reflection import ConstructorElement, FieldElement, MethodElement


class Invoice:
    total: float = 0.0

    def __init__(self, number: str) -> None:
        self.number = number

    def pay(self, amount: float) -> None:
        pass


class Printable:
    pass


reflection = RuntimeHintsPredicates.reflection()
proxies = RuntimeHintsPredicates.proxies()


class TestTypePredicates:
    """Test predicates on types."""

    def test_on_type(self, runtime_hints: RuntimeHints):
        assert not reflection.on_type(Invoice)(runtime_hints)

        runtime_hints.reflection.register_type(Invoice)

        assert reflection.on_type(Invoice)(runtime_hints)

    def test_with_member_categories(self, runtime_hints: RuntimeHints):
        runtime_hints.reflection.register_type(Invoice, MemberCategory.DECLARED_FIELDS)

        predicate = reflection.on_type(Invoice)

        assert predicate.with_member_categories(MemberCategory.DECLARED_FIELDS)(runtime_hints)
        assert not predicate.with_member_categories(MemberCategory.PUBLIC_FIELDS)(runtime_hints)


class TestExecutablePredicates:
    """Test predicates on constructors and methods."""

    def test_on_method_introspect_and_invoke(self, runtime_hints: RuntimeHints):
        method = MethodElement(Invoice, "pay", Invoice.__dict__["pay"])
        runtime_hints.reflection.register_method(method, ExecutableMode.INTROSPECT)

        assert reflection.on_method(Invoice, "pay").introspect()(runtime_hints)
        assert not reflection.on_method(Invoice, "pay").invoke()(runtime_hints)

    def test_on_method_parameter_types(self, runtime_hints: RuntimeHints):
        runtime_hints.reflection.register_method(
            MethodElement(Invoice, "pay", Invoice.__dict__["pay"])
        )

        assert reflection.on_method(Invoice, "pay", (float,)).invoke()(runtime_hints)
        assert not reflection.on_method(Invoice, "pay", (int,))(runtime_hints)
        assert not reflection.on_method(Invoice, "refund")(runtime_hints)

    def test_on_constructor(self, runtime_hints: RuntimeHints):
        runtime_hints.reflection.register_constructor(
            ConstructorElement(Invoice, Invoice.__init__)
        )

        assert reflection.on_constructor(Invoice, str).invoke()(runtime_hints)
        assert not reflection.on_constructor(Invoice)(runtime_hints)
        assert not reflection.on_method(Invoice, "__init__", (int,))(runtime_hints)

    def test_constructor_is_not_a_method(self, runtime_hints: RuntimeHints):
        runtime_hints.reflection.register_method(
            MethodElement(Invoice, "pay", Invoice.__dict__["pay"])
        )

        assert not reflection.on_constructor(Invoice, float)(runtime_hints)

    def test_unknown_type(self, runtime_hints: RuntimeHints):
        assert not reflection.on_method(Invoice, "pay")(runtime_hints)


class TestFieldAndProxyPredicates:
    """Test predicates on fields and proxies."""

    def test_on_field(self, runtime_hints: RuntimeHints):
        runtime_hints.reflection.register_field(FieldElement(Invoice, "total", float))

        assert reflection.on_field(Invoice, "total")(runtime_hints)
        assert not reflection.on_field(Invoice, "number")(runtime_hints)
        assert not reflection.on_field(Printable, "total")(runtime_hints)

    def test_for_interfaces(self, runtime_hints: RuntimeHints):
        runtime_hints.proxies.register_proxy(Invoice, Printable)

        assert proxies.for_interfaces(Invoice, Printable)(runtime_hints)
        assert not proxies.for_interfaces(Printable, Invoice)(runtime_hints)
        assert not proxies.for_interfaces(Invoice)(runtime_hints)
