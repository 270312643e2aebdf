"""Tests for enum definitions, codes and schema evolution."""

import pytest

from enumfield.core.definition import (
    EnumDefinition,
    all_codes,
    check_compatible,
    decode,
    define,
    encode,
)
from enumfield.core.errors import (
    DuplicateLabelError,
    IncompatibleDefinitionError,
    InvalidLabelError,
    UnknownCodeError,
    UnknownLabelError,
)


class TestDefine:
    """Test building definitions."""

    def test_codes_follow_declaration_order(self):
        """Test first label is code 0 and codes are contiguous."""
        roles = define(["volunteer", "admin"])

        assert encode("volunteer", roles) == 0
        assert encode("admin", roles) == 1
        assert roles.version == 1

    def test_duplicate_labels_rejected(self):
        """Test repeated labels fail at definition time."""
        with pytest.raises(DuplicateLabelError) as exc_info:
            define(["volunteer", "admin", "volunteer"])

        assert exc_info.value.code == "DUPLICATE_LABEL"
        assert exc_info.value.details["labels"] == ["volunteer"]

    def test_duplicates_listed_once(self):
        """Test each repeated label is reported once."""
        with pytest.raises(DuplicateLabelError) as exc_info:
            define(["a", "b", "a", "b", "a"])

        assert exc_info.value.details["labels"] == ["a", "b"]

    @pytest.mark.parametrize("bad", ["", "   ", None, 3])
    def test_invalid_labels_rejected(self, bad):
        """Test labels must be non-empty strings."""
        with pytest.raises(InvalidLabelError):
            define(["volunteer", bad])

    def test_accepts_any_iterable(self):
        """Test labels can come from a generator."""
        statuses = define(label for label in ("active", "archived"))

        assert statuses.labels == ("active", "archived")

    def test_empty_definition_has_no_codes(self):
        """Test an empty definition is allowed but decodes nothing."""
        empty = define([])

        assert len(empty) == 0
        with pytest.raises(UnknownCodeError):
            decode(0, empty)

    def test_direct_construction_rejects_duplicates(self):
        """Test building EnumDefinition directly enforces unique labels."""
        with pytest.raises(DuplicateLabelError):
            EnumDefinition(labels=("a", "b", "a"))

    def test_direct_construction_normalizes_to_tuple(self):
        """Test a list of labels is stored as a tuple so the definition stays hashable."""
        roles = EnumDefinition(labels=["volunteer", "admin"])

        assert roles.labels == ("volunteer", "admin")
        assert hash(roles) == hash(define(["volunteer", "admin"]))

    @pytest.mark.parametrize("labels", ["admin", b"admin"])
    def test_bare_string_rejected(self, labels):
        """Test a single string is not split into one label per character."""
        with pytest.raises(InvalidLabelError):
            define(labels)
        with pytest.raises(InvalidLabelError):
            EnumDefinition(labels=labels)

    def test_definition_is_immutable_and_hashable(self):
        """Test definitions can be shared and used as dict keys."""
        roles = define(["volunteer", "admin"])

        with pytest.raises(AttributeError):
            roles.labels = ("admin",)
        assert {roles: "ok"}[define(["volunteer", "admin"])] == "ok"


class TestEncodeDecode:
    """Test label <-> code translation."""

    def test_decode_known_code(self):
        """Test decode returns the label at that position."""
        roles = define(["volunteer", "admin"])

        assert decode(0, roles) == "volunteer"
        assert decode(1, roles) == "admin"

    def test_encode_unknown_label_fails(self):
        """Test unknown labels raise UnknownLabelError."""
        roles = define(["volunteer", "admin"])

        with pytest.raises(UnknownLabelError, match="nonexistent"):
            encode("nonexistent", roles)

    def test_unknown_label_error_is_value_error(self):
        """Test label errors can be caught as ValueError."""
        roles = define(["volunteer", "admin"])

        with pytest.raises(ValueError):
            encode("Admin", roles)

    def test_encode_unhashable_label_fails(self):
        """Test unhashable input is an unknown label, not a TypeError."""
        roles = define(["volunteer", "admin"])

        with pytest.raises(UnknownLabelError):
            roles.encode(["admin"])

    @pytest.mark.parametrize("code", [-1, 2, 99, True, "1", 1.0, None])
    def test_decode_out_of_range_fails(self, code):
        """Test codes outside [0, len) raise UnknownCodeError."""
        roles = define(["volunteer", "admin"])

        with pytest.raises(UnknownCodeError) as exc_info:
            decode(code, roles)

        assert exc_info.value.details["size"] == 2

    def test_round_trip(self):
        """Test every label and code survives a round trip."""
        roles = define(["volunteer", "admin", "vendor", "customer"])

        for label in roles:
            assert decode(encode(label, roles), roles) == label
        for code in range(len(roles)):
            assert encode(decode(code, roles), roles) == code


class TestAllCodes:
    """Test the label -> code projection."""

    def test_preserves_declaration_order(self):
        """Test mapping keys keep declaration order with codes 0..n-1."""
        roles = define(["volunteer", "admin", "vendor", "customer"])

        codes = all_codes(roles)

        assert list(codes.items()) == [
            ("volunteer", 0),
            ("admin", 1),
            ("vendor", 2),
            ("customer", 3),
        ]

    def test_mapping_is_read_only(self):
        """Test callers cannot mutate the mapping."""
        roles = define(["volunteer", "admin"])

        with pytest.raises(TypeError):
            all_codes(roles)["vendor"] = 2


class TestSchemaEvolution:
    """Test appending labels keeps stored codes valid."""

    def test_extend_keeps_existing_codes(self):
        """Test admin stays 1 after vendor and customer are appended."""
        v1 = define(["volunteer", "admin"])

        v2 = v1.extend("vendor", "customer")

        assert encode("admin", v2) == 1
        assert encode("vendor", v2) == 2
        assert encode("customer", v2) == 3
        assert v2.version == 2
        assert v1.labels == ("volunteer", "admin")

    def test_extend_with_existing_label_fails(self):
        """Test extend cannot reintroduce a label."""
        v1 = define(["volunteer", "admin"])

        with pytest.raises(DuplicateLabelError):
            v1.extend("admin")

    def test_reorder_against_previous_fails(self):
        """Test reordering labels is refused when previous is given."""
        v1 = define(["volunteer", "admin"])

        with pytest.raises(IncompatibleDefinitionError) as exc_info:
            define(["admin", "volunteer"], previous=v1)

        assert exc_info.value.details["moved"] == {"volunteer": [0, 1], "admin": [1, 0]}

    def test_remove_against_previous_fails(self):
        """Test removing labels is refused when previous is given."""
        v1 = define(["volunteer", "admin", "vendor"])

        with pytest.raises(IncompatibleDefinitionError) as exc_info:
            define(["volunteer", "admin"], previous=v1)

        assert exc_info.value.details["removed"] == ["vendor"]

    def test_same_labels_keep_version(self):
        """Test redefining identical labels does not bump the version."""
        v1 = define(["volunteer", "admin"])

        assert define(["volunteer", "admin"], previous=v1).version == 1

    def test_check_compatible_accepts_append(self):
        """Test check_compatible passes for appended labels."""
        v1 = define(["volunteer", "admin"])
        v2 = EnumDefinition(labels=("volunteer", "admin", "vendor"), version=2)

        check_compatible(v1, v2)
