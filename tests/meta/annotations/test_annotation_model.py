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
Description: Tests for annotation types, their aliases and their application to classes, functions and fields.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Annotated, ClassVar

import pytest

from metahints.meta.annotations import (
    MISSING,
    Annotation,
    AnnotationConfigurationError,
    AnnotationModificationError,
    AnnotationTargetError,
    SynthesizedAnnotation,
    alias_for,
    annotations_from_hint,
    declared_annotations,
    synthesized_type,
)


class Cached(Annotation):
    value: int = 60
    region: str = "default"


class Route(Annotation):
    value: str = alias_for("path", default="")
    path: str = alias_for("value", default="")


class Named(Annotation):
    value: str = alias_for("name", default="")
    name: str = ""


class Tagged(Annotation):
    value: tuple[str, ...] = ()


class Required(Annotation):
    name: str


class Regional(Cached):
    zone: str = "eu"


# =============================================================================
# Declaration Tests
# =============================================================================


class TestAnnotationDeclaration:
    """Test the attributes and aliases collected from annotation types."""

    def test_attributes_with_defaults(self):
        assert Cached.__attributes__ == {"value": 60, "region": "default"}
        assert Required.__attributes__ == {"name": MISSING}

    def test_private_and_class_variables_are_not_attributes(self):
        class Flagged(Annotation):
            _hidden: int = 0
            registry: ClassVar[int] = 0
            value: bool = True

        assert Flagged.__attributes__ == {"value": True}

    def test_attributes_are_inherited(self):
        assert Regional.__attributes__ == {"value": 60, "region": "default", "zone": "eu"}

    def test_mirrors_are_grouped(self):
        assert Route.__mirrors__ == {
            "value": frozenset({"value", "path"}),
            "path": frozenset({"value", "path"}),
        }

    def test_mirror_declared_on_one_side_is_implied_on_the_other(self):
        assert Named.__aliases__["name"].attribute == "value"
        assert Named.__aliases__["name"].is_mirror

    def test_cannot_define_init(self):
        with pytest.raises(AnnotationConfigurationError, match="__init__"):

            class Broken(Annotation):  # pylint: disable=unused-variable
                def __init__(self) -> None:
                    pass

    def test_alias_for_itself(self):
        with pytest.raises(AnnotationConfigurationError, match="alias for itself"):

            class Broken(Annotation):  # pylint: disable=unused-variable
                value: str = alias_for("value", default="")

    def test_alias_for_undeclared_attribute(self):
        with pytest.raises(AnnotationConfigurationError, match="'missing' which is not declared"):

            class Broken(Annotation):  # pylint: disable=unused-variable
                value: str = alias_for("missing", default="")

    def test_mirrors_with_different_defaults(self):
        with pytest.raises(AnnotationConfigurationError, match="same default"):

            class Broken(Annotation):  # pylint: disable=unused-variable
                value: str = alias_for("path", default="a")
                path: str = alias_for("value", default="b")

    def test_alias_without_type_annotation(self):
        with pytest.raises(AnnotationConfigurationError, match="needs a type annotation"):

            class Broken(Annotation):  # pylint: disable=unused-variable
                path: str = ""
                value = alias_for("path", default="")

    def test_alias_for_attribute_of_non_annotation(self):
        with pytest.raises(AnnotationConfigurationError, match="not an annotation type"):

            class Broken(Annotation):  # pylint: disable=unused-variable
                value: int = alias_for("real", annotation=int, default=0)  # type: ignore

    def test_alias_for_undeclared_meta_attribute(self):
        with pytest.raises(AnnotationConfigurationError, match="not declared by 'Cached'"):

            class Broken(Annotation):  # pylint: disable=unused-variable
                ttl: int = alias_for("ttl", annotation=Cached, default=0)


# =============================================================================
# Instance Tests
# =============================================================================


class TestAnnotationInstances:
    """Test building, comparing and freezing annotation instances."""

    def test_defaults(self):
        cached = Cached()

        assert cached.value == 60
        assert cached.region == "default"
        assert cached.__explicit__ == frozenset()

    def test_positional_argument_is_value(self):
        cached = Cached(120, region="slow")

        assert cached.value == 120
        assert cached.region == "slow"
        assert cached.__explicit__ == frozenset({"value", "region"})

    @pytest.mark.parametrize(
        "args, kwargs, message",
        [
            ((1, 2), {}, "at most 1 positional argument"),
            ((1,), {"value": 2}, "multiple values"),
            ((), {"ttl": 2}, "unexpected attribute"),
        ],
    )
    def test_invalid_arguments(self, args: tuple, kwargs: dict, message: str):
        with pytest.raises(TypeError, match=message):
            Cached(*args, **kwargs)

    def test_positional_argument_without_value_attribute(self):
        with pytest.raises(TypeError, match="declares no 'value' attribute"):
            Required("x")

    def test_missing_required_attribute(self):
        with pytest.raises(TypeError, match="missing required attribute 'name'"):
            Required()

    def test_tuple_attributes_accept_lists_and_single_values(self):
        assert Tagged("a").value == ("a",)
        assert Tagged(["a", "b"]).value == ("a", "b")
        assert Tagged(("a",)).value == ("a",)

    def test_mirrored_attributes_share_their_value(self):
        assert Route("/users").path == "/users"
        assert Route(path="/users").value == "/users"
        assert Route(value="/a", path="/a").attributes() == {"value": "/a", "path": "/a"}

    def test_mirrored_attributes_with_different_values(self):
        with pytest.raises(AnnotationConfigurationError, match="different values"):
            Route(value="/a", path="/b")

    def test_cannot_be_modified(self):
        cached = Cached()

        with pytest.raises(AnnotationModificationError):
            cached.value = 1  # type: ignore
        with pytest.raises(AnnotationModificationError):
            del cached.region

    def test_equality_and_hash(self):
        assert Cached(1) == Cached(1)
        assert hash(Cached(1)) == hash(Cached(1))
        assert Cached(1) != Cached(2)
        assert Cached(60) != Regional()

    def test_repr(self):
        assert repr(Cached()) == "@Cached(value=60, region='default')"


# =============================================================================
# Application Tests
# =============================================================================


class TestAnnotationApplication:
    """Test applying annotations to classes, functions and fields."""

    def test_decorated_class_is_returned_unchanged(self):
        class Service:
            pass

        assert Cached()(Service) is Service
        assert declared_annotations(Service) == (Cached(),)

    def test_stacked_annotations_keep_declaration_order(self):
        @Cached(1)
        @Cached(2)
        def lookup() -> None:
            pass

        assert declared_annotations(lookup) == (Cached(1), Cached(2))

    def test_static_and_class_methods(self):
        class Service:
            @Cached(1)
            @staticmethod
            def build() -> None:
                pass

            @Cached(2)
            @classmethod
            def create(cls) -> None:
                pass

        assert declared_annotations(Service.__dict__["build"]) == (Cached(1),)
        assert declared_annotations(Service.__dict__["create"]) == (Cached(2),)

    def test_class_annotations_are_not_inherited(self):
        @Cached()
        class Service:
            pass

        class Child(Service):
            pass

        assert declared_annotations(Child) == ()

    def test_invalid_target(self):
        with pytest.raises(AnnotationTargetError):
            Cached()(42)

    def test_unannotated_targets(self):
        assert declared_annotations(len) == ()
        assert declared_annotations(42) == ()

    def test_annotations_from_hint(self):
        assert annotations_from_hint(Annotated[int, Cached(), "doc"]) == (Cached(),)
        assert annotations_from_hint(ClassVar[Annotated[int, Tagged("a")]]) == (Tagged("a"),)
        assert annotations_from_hint(int) == ()
        assert annotations_from_hint(None) == ()


class TestSynthesizedType:
    """Test the types of synthesized annotation instances."""

    def test_derives_from_annotation_type(self):
        synthesized = synthesized_type(Route)

        assert issubclass(synthesized, Route)
        assert issubclass(synthesized, SynthesizedAnnotation)
        assert synthesized.__name__ == "RouteSynthesized"
        assert synthesized.__attributes__ == Route.__attributes__

    def test_is_cached(self):
        assert synthesized_type(Cached) is synthesized_type(Cached)

    def test_instances_carry_values(self):
        route = synthesized_type(Route)(value="/a", path="/a")

        assert route.path == "/a"
        assert isinstance(route, SynthesizedAnnotation)
