"""Unit tests for the label sequence model."""

import pytest

from uri_host.labels import LabelSequence, resolve_offset


class TestResolveOffset:
    """Test suite for offset resolution."""

    @pytest.mark.parametrize(
        "offset,expected",
        [(0, 0), (1, 1), (2, 2), (3, None), (-1, 2), (-2, 1), (-3, 0), (-4, None)],
    )
    def test_three_labels(self, offset, expected):
        """Test both offset directions on a three-label host."""
        assert resolve_offset(offset, 3) == expected

    def test_no_labels(self):
        """Test nothing resolves on an empty sequence."""
        assert resolve_offset(0, 0) is None
        assert resolve_offset(-1, 0) is None

    @pytest.mark.parametrize("offset", ["1", 1.0, None, True])
    def test_non_integer_offsets(self, offset):
        """Test non-integer offsets raise TypeError."""
        with pytest.raises(TypeError):
            resolve_offset(offset, 3)


class TestLabelSequence:
    """Test suite for LabelSequence."""

    @pytest.fixture
    def labels(self):
        """Labels of 'www.example.com'."""
        return LabelSequence(("com", "example", "www"))

    @pytest.fixture
    def absolute(self):
        """Labels of 'www.example.com.'."""
        return LabelSequence(("", "com", "example", "www"))

    def test_to_host_text(self, labels, absolute):
        """Test labels join back into host text."""
        assert labels.to_host_text() == "www.example.com"
        assert absolute.to_host_text() == "www.example.com."

    def test_absolute(self, labels, absolute):
        """Test the root label marks a sequence absolute."""
        assert not labels.is_absolute
        assert absolute.is_absolute
        assert not LabelSequence(("",)).is_absolute

    def test_relative(self, labels, absolute):
        """Test relative labels drop the root label."""
        assert absolute.relative == ("com", "example", "www")
        assert labels.relative == ("com", "example", "www")
        assert LabelSequence(("",)).relative == ()

    def test_get(self, labels):
        """Test labels are read through signed offsets."""
        assert labels.get(0) == "com"
        assert labels.get(-1) == "www"
        assert labels.get(3) is None
        assert labels.get(3, "default") == "default"

    def test_keys(self):
        """Test keys lists every offset or those holding a label."""
        labels = LabelSequence(("com", "toto", "toto"))

        assert labels.keys() == [0, 1, 2]
        assert labels.keys("toto") == [1, 2]
        assert labels.keys("missing") == []

    def test_iteration_order(self, labels):
        """Test iteration starts from the right-most label."""
        assert list(labels) == ["com", "example", "www"]
        assert len(labels) == 3

    def test_equality(self, labels):
        """Test sequences compare by their labels."""
        assert labels == LabelSequence(["com", "example", "www"])
        assert hash(labels) == hash(LabelSequence(["com", "example", "www"]))
        assert labels != LabelSequence(("com",))

    def test_replace(self, labels):
        """Test a label can be replaced by several labels."""
        result = labels.replace(1, ("uk", "co"))
        assert result.to_host_text() == "www.co.uk.com"

    def test_remove(self, labels):
        """Test labels are removed by storage index."""
        assert labels.remove({0, 2}).to_host_text() == "example"

    def test_append_keeps_root(self, absolute):
        """Test appended labels go before the root label."""
        result = absolute.append(("bar", "foo"))
        assert result.to_host_text() == "www.example.com.foo.bar."

    def test_prepend(self, labels, absolute):
        """Test prepended labels go on the left."""
        assert labels.prepend(("shop",)).to_host_text() == "shop.www.example.com"
        assert absolute.prepend(("shop",)).to_host_text() == "shop.www.example.com."

    def test_splice(self, labels, absolute):
        """Test relative ranges are replaced and the root label survives."""
        assert labels.splice(0, 1, ("org",)).to_host_text() == "www.example.org"
        assert absolute.splice(2, 3, ()).to_host_text() == "example.com."
        assert absolute.splice(0, 3, ()).labels == ()

    def test_root_toggles(self, labels, absolute):
        """Test adding and removing the root label is idempotent."""
        assert labels.with_root() == absolute
        assert absolute.with_root() is absolute
        assert absolute.without_root() == labels
        assert labels.without_root() is labels
        assert LabelSequence(("",)).with_root().labels == ("",)
