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
Description: Tests for the hints registered to read annotations at runtime.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from metahints.hints import (
    MemberCategory,
    RuntimeHints,
    RuntimeHintsPredicates,
    register_annotation_if_necessary,
    register_synthesized_annotation,
)
from metahints.meta.annotations import (
    Annotation,
    MergedAnnotations,
    SynthesizedAnnotation,
    alias_for,
)


class Retry(Annotation):
    attempts: int = 0


@Retry()
class Resilient(Annotation):
    value: int = alias_for("attempts", annotation=Retry, default=3)


class TestRegisterSynthesizedAnnotation:
    """Test the hints of a synthesized annotation."""

    def test_registers_type_and_proxy(self, runtime_hints: RuntimeHints):
        register_synthesized_annotation(runtime_hints, Retry)

        assert (
            RuntimeHintsPredicates.reflection()
            .on_type(Retry)
            .with_member_categories(MemberCategory.INVOKE_DECLARED_METHODS)(runtime_hints)
        )
        assert RuntimeHintsPredicates.proxies().for_interfaces(Retry, SynthesizedAnnotation)(
            runtime_hints
        )

    def test_logs(self, runtime_hints: RuntimeHints, log_messages: list[str]):
        register_synthesized_annotation(runtime_hints, Retry)

        assert any("synthesized annotation hints for Retry" in m for m in log_messages)


class TestRegisterAnnotationIfNecessary:
    """Test that only synthesizable annotations are registered."""

    def test_plain_annotation_is_not_registered(self, runtime_hints: RuntimeHints):
        retry = MergedAnnotations.from_annotations([Retry()]).get(Retry)

        register_annotation_if_necessary(runtime_hints, retry)

        assert runtime_hints.reflection.type_hints() == ()
        assert runtime_hints.proxies.proxies() == ()

    def test_overridden_annotation_is_registered(self, runtime_hints: RuntimeHints):
        retry = MergedAnnotations.from_annotations([Resilient()]).get(Retry)

        register_annotation_if_necessary(runtime_hints, retry)

        assert [p.interfaces for p in runtime_hints.proxies.proxies()] == [
            (Retry, SynthesizedAnnotation)
        ]
        assert runtime_hints.reflection.get_type_hint(Resilient) is None
