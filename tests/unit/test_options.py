"""Tests for BuildOptions."""

from dataclasses import FrozenInstanceError, fields

import pytest

from podtree import BuildOptions


@pytest.mark.unit
class TestBuildOptions:
    """Tests for BuildOptions defaults, cloning and validation."""

    def test_defaults(self):
        """Test per-item wrapping and no invariant checks by default."""
        options = BuildOptions()
        assert options.merge_adjacent_items is False
        assert options.check_invariants is False

    def test_frozen(self):
        """Test options cannot be modified in place."""
        options = BuildOptions()
        with pytest.raises(FrozenInstanceError):
            options.merge_adjacent_items = True  # type: ignore[misc]

    def test_create_updated(self):
        """Test create_updated returns a modified copy."""
        options = BuildOptions()
        updated = options.create_updated(merge_adjacent_items=True)

        assert updated.merge_adjacent_items is True
        assert options.merge_adjacent_items is False
        assert isinstance(updated, BuildOptions)

    @pytest.mark.parametrize("name", ["merge_adjacent_items", "check_invariants"])
    def test_non_bool_rejected(self, name):
        """Test flags must be real booleans."""
        with pytest.raises(ValueError, match=name):
            BuildOptions(**{name: "yes"})

    def test_fields_have_help(self):
        """Test every option documents itself in field metadata."""
        for option in fields(BuildOptions):
            assert option.metadata["help"]
            assert option.metadata["importance"] in ("core", "advanced")
