"""Unit tests for urlbuilder.url.query module."""

import pytest

from urlbuilder.exceptions import InvalidPercentEncodingError
from urlbuilder.url.query import QueryParameterStore


class TestParseFrom:
    """Tests for parsing query strings."""

    def test_repeated_and_bare_parameters(self):
        """Test multiplicity and absent values."""
        store = QueryParameterStore.from_string("a=1&a=2&b")

        assert list(store.values("a")) == ["1", "2"]
        assert list(store.values("b")) == [None]
        assert store.serialize() == "a=1&a=2&b"

    def test_empty_value_is_not_absent(self):
        """Test '?flag=' and '?flag' stay different."""
        store = QueryParameterStore.from_string("flag=&bare")

        assert store.pairs() == (("flag", ""), ("bare", None))
        assert store.serialize() == "flag=&bare"

    def test_empty_pieces_are_skipped(self):
        """Test tolerant parsing of '&&' and trailing '&'."""
        store = QueryParameterStore.from_string("&&a=1&&b=2&")
        assert store.pairs() == (("a", "1"), ("b", "2"))

    def test_split_on_first_equals(self):
        """Test that only the first '=' separates name and value."""
        store = QueryParameterStore.from_string("==b")

        assert store.pairs() == (("", "=b"),)
        assert store.serialize() == "=%3Db"

    def test_names_and_values_are_decoded(self):
        """Test percent-decoding of names and values."""
        store = QueryParameterStore.from_string("a%20b=c%2B%2B%20%26%20rust")
        assert store.pairs() == (("a b", "c++ & rust"),)

    def test_plus_is_literal_by_default(self):
        """Test '+' is only a space in legacy form mode."""
        assert QueryParameterStore.from_string("q=a+b").get("q") == "a+b"

    def test_plus_as_space_in_form_mode(self, form_codec):
        """Test '+' decodes as a space with the form codec."""
        assert QueryParameterStore.from_string("q=a+b", form_codec).get("q") == "a b"

    def test_parse_from_appends(self):
        """Test parse_from adds to existing parameters."""
        store = QueryParameterStore([("a", "1")])
        result = store.parse_from("b=2")

        assert result is store
        assert store.pairs() == (("a", "1"), ("b", "2"))

    def test_malformed_escape_offset(self):
        """Test error offsets point into the query string."""
        with pytest.raises(InvalidPercentEncodingError) as exc_info:
            QueryParameterStore.from_string("a=1&b=%zz")
        assert exc_info.value.offset == 6

    def test_malformed_escape_offset_with_start(self):
        """Test start shifts the reported offset."""
        with pytest.raises(InvalidPercentEncodingError) as exc_info:
            QueryParameterStore().parse_from("%zz=1", start=20)
        assert exc_info.value.offset == 20


class TestMutation:
    """Tests for add, set and remove operations."""

    def test_add_keeps_insertion_order(self):
        """Test no sorting or deduplication happens."""
        store = QueryParameterStore()
        store.add("b", "1").add("a", "2").add("b", "1")

        assert store.pairs() == (("b", "1"), ("a", "2"), ("b", "1"))

    def test_add_without_value_is_absent(self):
        """Test the value defaults to absent."""
        store = QueryParameterStore().add("flag")
        assert store.serialize() == "flag"

    def test_set_replaces_and_moves_to_end(self):
        """Test set removes all pairs with the name then appends one."""
        store = QueryParameterStore([("a", "1"), ("b", "2"), ("a", "3")])
        store.set("a", "9")

        assert store.pairs() == (("b", "2"), ("a", "9"))

    def test_remove_matching_pair(self):
        """Test remove drops pairs matching name and value."""
        store = QueryParameterStore([("a", "1"), ("a", "2"), ("a", None)])
        store.remove("a", "1")

        assert store.pairs() == (("a", "2"), ("a", None))
        store.remove("a", None)
        assert store.pairs() == (("a", "2"),)

    def test_remove_all_returns_values(self):
        """Test remove_all drops every pair with the name."""
        store = QueryParameterStore([("a", "1"), ("b", "2"), ("a", None)])

        assert store.remove_all("a") == ["1", None]
        assert store.pairs() == (("b", "2"),)
        assert store.remove_all("missing") == []

    def test_clear(self):
        """Test clear empties the store."""
        store = QueryParameterStore([("a", "1")])
        store.clear()
        assert len(store) == 0

    @pytest.mark.parametrize("name, value", [(1, "a"), ("a", 1), (None, None)])
    def test_add_rejects_non_strings(self, name, value):
        """Test names must be str and values str or None."""
        with pytest.raises(TypeError):
            QueryParameterStore().add(name, value)


class TestAccess:
    """Tests for read access."""

    def test_values_is_lazy(self):
        """Test values returns an iterator."""
        values = QueryParameterStore([("a", "1")]).values("a")
        assert iter(values) is values
        assert list(values) == ["1"]

    def test_values_missing_name(self):
        """Test values of an unknown name is empty."""
        assert list(QueryParameterStore().values("a")) == []

    def test_get(self):
        """Test get returns the first value or the default."""
        store = QueryParameterStore([("a", "1"), ("a", "2")])

        assert store.get("a") == "1"
        assert store.get("b", "x") == "x"

    def test_contains_and_len(self):
        """Test membership is by name."""
        store = QueryParameterStore([("a", None), ("b", "")])

        assert "a" in store
        assert "c" not in store
        assert len(store) == 2

    def test_names_first_seen_order(self):
        """Test names are distinct and ordered."""
        store = QueryParameterStore([("b", "1"), ("a", "2"), ("b", "3")])
        assert store.names() == ["b", "a"]

    def test_to_dict(self):
        """Test grouping values by name."""
        store = QueryParameterStore([("b", "1"), ("a", None), ("b", "3")])
        assert store.to_dict() == {"b": ["1", "3"], "a": [None]}

    def test_iteration_yields_pairs(self):
        """Test iterating over the store."""
        store = QueryParameterStore([("a", "1"), ("b", None)])
        assert list(store) == [("a", "1"), ("b", None)]

    def test_equality(self):
        """Test stores compare by pairs in order."""
        assert QueryParameterStore([("a", "1")]) == QueryParameterStore.from_string("a=1")
        assert QueryParameterStore([("a", "1"), ("b", "2")]) != QueryParameterStore(
            [("b", "2"), ("a", "1")]
        )
        assert QueryParameterStore([("a", "")]) != QueryParameterStore([("a", None)])

    def test_copy_is_independent(self):
        """Test copies do not share the pair list."""
        store = QueryParameterStore([("a", "1")])
        copy = store.copy()
        copy.add("b", "2")

        assert store.pairs() == (("a", "1"),)


class TestSerialize:
    """Tests for serializing parameters."""

    def test_empty(self):
        """Test an empty store serializes to an empty string."""
        assert QueryParameterStore().serialize() == ""

    def test_reserved_characters_escaped(self):
        """Test separators and spaces are escaped in names and values."""
        store = QueryParameterStore([("a b", "x&y=z"), ("path", "/a/b?c")])
        assert store.serialize() == "a%20b=x%26y%3Dz&path=/a/b%3Fc"

    def test_form_mode(self, form_codec):
        """Test legacy form mode writes spaces as '+'."""
        store = QueryParameterStore([("q", "a b+c")])

        assert store.serialize(form_codec) == "q=a+b%2Bc"
        assert store.serialize() == "q=a%20b%2Bc"
