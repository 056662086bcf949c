"""
Tests for Structure Specifications and the generic law checker
"""

import pytest

from algebraic_structures import (
    AssociativityViolation,
    ClosureViolation,
    CommutativityViolation,
    DefinedSet,
    Group,
    IdentityNotMember,
    InverseViolation,
    Law,
    OpSet,
    SimpleSet,
    StructureKind,
    StructureSpec,
    UnsupportedOnInfiniteSet,
    check,
)
from algebraic_structures.structures import MISSING, KIND_LAWS


def mod3(a, b):
    return (a + b) % 3


class TestStructureKind:
    def test_each_kind_adds_laws(self):
        assert StructureKind.MAGMA.laws == (Law.CLOSURE,)
        assert StructureKind.SEMIGROUP.laws == (Law.CLOSURE, Law.ASSOCIATIVITY)
        assert set(StructureKind.SEMIGROUP.laws) < set(StructureKind.MONOID.laws)
        assert set(StructureKind.MONOID.laws) < set(StructureKind.GROUP.laws)
        assert set(StructureKind.GROUP.laws) < set(StructureKind.ABELIAN_GROUP.laws)
        assert set(StructureKind.ABELIAN_GROUP.laws) < set(StructureKind.RING.laws)

    def test_abelian_group_order(self):
        assert StructureKind.ABELIAN_GROUP.laws == (
            Law.CLOSURE, Law.COMMUTATIVITY, Law.ASSOCIATIVITY, Law.IDENTITY, Law.INVERSE,
        )

    def test_ring_checks_distributivity_last(self):
        assert StructureKind.RING.laws[-1] is Law.DISTRIBUTIVITY
        assert StructureKind.FIELD.laws[-1] is Law.DISTRIBUTIVITY

    def test_every_kind_has_laws(self):
        assert set(KIND_LAWS) == set(StructureKind)


class TestStructureSpec:
    def test_missing_ops_rejected(self):
        with pytest.raises(ValueError):
            StructureSpec(SimpleSet(range(3)), OpSet(mod3), StructureKind.MONOID)
        with pytest.raises(ValueError):
            StructureSpec(SimpleSet(range(3)), OpSet(mod3, identity=0), StructureKind.GROUP)

    def test_none_is_a_valid_identity(self):
        spec = StructureSpec(SimpleSet([None]), OpSet(lambda a, b: None, identity=None),
                             StructureKind.MONOID)
        assert spec.ops.identity is None
        assert spec.ops.inverse is MISSING
        check(spec)

    def test_label(self):
        spec = StructureSpec(SimpleSet(), OpSet(mod3), StructureKind.MAGMA)
        assert spec.label == "magma"
        named = StructureSpec(SimpleSet(), OpSet(mod3), StructureKind.MAGMA, name="Z_3")
        assert named.label == "Z_3"

    def test_multiplicative_spec_only_for_fields(self):
        spec = StructureSpec(SimpleSet(range(3)), OpSet(mod3), StructureKind.MAGMA)
        with pytest.raises(ValueError):
            spec.multiplicative_spec()

    def test_multiplicative_spec_excludes_zero(self):
        spec = StructureSpec(
            SimpleSet(range(3)),
            OpSet(mod3, identity=0, inverse=lambda a: (-a) % 3,
                  secondary=lambda a, b: (a * b) % 3,
                  secondary_identity=1, secondary_inverse=lambda a: a),
            StructureKind.FIELD,
        )
        derived = spec.multiplicative_spec()
        assert derived.kind is StructureKind.ABELIAN_GROUP
        assert derived.elements == SimpleSet([1, 2])
        check(spec)


class TestCheck:
    def test_rejects_predicate_defined_sets(self):
        spec = StructureSpec(DefinedSet(lambda x: True), OpSet(mod3), StructureKind.MAGMA)
        with pytest.raises(UnsupportedOnInfiniteSet):
            check(spec)

    def test_explicit_laws(self):
        spec = StructureSpec(SimpleSet(range(3)), OpSet(lambda a, b: (a - b) % 3),
                             StructureKind.MAGMA)
        check(spec)
        with pytest.raises(AssociativityViolation):
            check(spec, laws=[Law.ASSOCIATIVITY])
        with pytest.raises(CommutativityViolation):
            check(spec, laws=[Law.COMMUTATIVITY])

    def test_identity_membership_checked_before_laws(self):
        # closure also fails, but identity membership is reported first
        spec = StructureSpec(SimpleSet(range(3)), OpSet(lambda a, b: a + b, identity=5),
                             StructureKind.MONOID)
        with pytest.raises(IdentityNotMember):
            check(spec)
        with pytest.raises(ClosureViolation):
            check(spec, laws=[Law.CLOSURE])

    def test_first_violation_follows_law_order(self):
        # subtraction mod 3 violates both commutativity and associativity
        spec = StructureSpec(
            SimpleSet(range(3)),
            OpSet(lambda a, b: (a - b) % 3, identity=0, inverse=lambda a: a),
            StructureKind.ABELIAN_GROUP,
        )
        with pytest.raises(CommutativityViolation):
            check(spec)
        group = StructureSpec(spec.elements, spec.ops, StructureKind.GROUP)
        with pytest.raises(AssociativityViolation):
            check(group)

    def test_left_inverse_is_opt_in(self):
        # a * b = b on {0, 1}: the constant 1 is a right inverse of every
        # element, but 1 * 0 = 0, so it is not a left inverse of 0
        spec = StructureSpec(SimpleSet([0, 1]), OpSet(lambda a, b: b, identity=1, inverse=lambda a: 1),
                             StructureKind.GROUP)
        check(spec, laws=[Law.CLOSURE, Law.ASSOCIATIVITY, Law.INVERSE])
        with pytest.raises(InverseViolation) as excinfo:
            check(spec, laws=[Law.LEFT_INVERSE])
        assert excinfo.value.witness == (0,)

    def test_repeated_checks_are_read_only(self):
        calls = []

        def counting(a, b):
            calls.append((a, b))
            return (a + b) % 3

        spec = StructureSpec(SimpleSet(range(3)), OpSet(counting), StructureKind.MAGMA)
        check(spec)
        first = len(calls)
        check(spec)
        assert len(calls) == 2 * first
        assert spec.elements == SimpleSet(range(3))

    def test_group_checks_both_inverse_sides(self):
        group = Group(0, lambda a: (-a) % 3, mod3, range(3))
        check(group.spec, laws=[Law.INVERSE, Law.LEFT_INVERSE])

    def test_explicit_law_needs_its_operations(self):
        spec = StructureSpec(SimpleSet(range(3)), OpSet(mod3), StructureKind.MAGMA)
        with pytest.raises(ValueError):
            check(spec, laws=[Law.SECONDARY_CLOSURE])
        with pytest.raises(ValueError):
            check(spec, laws=[Law.CLOSURE, Law.INVERSE])
        with pytest.raises(ValueError):
            check(spec, laws=[Law.DISTRIBUTIVITY])

    def test_violation_carries_witness(self):
        spec = StructureSpec(SimpleSet(range(3)), OpSet(lambda a, b: a + b), StructureKind.MAGMA)
        with pytest.raises(ClosureViolation) as excinfo:
            check(spec)
        assert excinfo.value.witness == (1, 2)
        assert excinfo.value.law == "closure"
        assert "magma" in str(excinfo.value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
