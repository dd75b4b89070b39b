"""Tests for BrandStore."""

from pathlib import Path

import pytest
from PIL import Image

from whitelabel.brands.fields import ColorUpdate
from whitelabel.brands.store import BrandStore
from whitelabel.exceptions import AssetError, InvalidFieldPathError, ValidationError


@pytest.fixture
def store() -> BrandStore:
    return BrandStore()


@pytest.fixture
def two_brands(store: BrandStore) -> BrandStore:
    store.add_brand()
    store.add_brand()
    return store


# =============================================================================
# add_brand
# =============================================================================
class TestAddBrand:
    """Tests for BrandStore.add_brand."""

    def test_add_selects_new_brand(self, store: BrandStore):
        """Should append the new brand and select it."""
        brand = store.add_brand()
        assert store.current == brand
        assert store.brands == (brand,)

    def test_defaults_follow_collection_size(self, store: BrandStore):
        """Should number defaults after the current list size."""
        first = store.add_brand()
        second = store.add_brand()
        assert first.display_name == "Brand 1"
        assert second.display_name == "Brand 2"
        assert second.package_name == "com.brand2.app"

    def test_lengths_grow_and_ids_distinct(self, store: BrandStore):
        """Should grow by one per call with distinct ids."""
        lengths = []
        for _ in range(25):
            store.add_brand()
            lengths.append(len(store))
        assert lengths == list(range(1, 26))
        ids = [b.id for b in store.brands]
        assert len(set(ids)) == len(ids)

    def test_defaults_restart_after_delete(self, two_brands: BrandStore):
        """Defaults use the current size, so names can repeat after a delete."""
        two_brands.delete_brand(two_brands.brands[0].id)
        third = two_brands.add_brand()
        assert third.display_name == "Brand 2"
        assert third.id != two_brands.brands[0].id


# =============================================================================
# update_field
# =============================================================================
class TestUpdateField:
    """Tests for BrandStore.update_field and apply."""

    def test_no_selection_is_noop(self, store: BrandStore):
        """Should do nothing when no brand is selected."""
        assert store.update_field("displayName", "X") is None
        assert len(store) == 0

    def test_no_selection_ignores_bad_path(self, store: BrandStore):
        """Should not validate the path when nothing is selected."""
        assert store.update_field("bogus", "X") is None

    def test_updates_selection_and_collection(self, two_brands: BrandStore):
        """Should replace the selection and its list entry together."""
        updated = two_brands.update_field("displayName", "Acme")
        assert updated is not None
        assert two_brands.current.display_name == "Acme"
        assert two_brands.brands[1].display_name == "Acme"
        assert two_brands.brands[0].display_name == "Brand 1"

    def test_nested_update_preserves_siblings(self, two_brands: BrandStore):
        """Should keep sibling keys of a nested update."""
        before = two_brands.current.to_json_dict()
        two_brands.update_field("colors.primary", "#ff0000")
        after = two_brands.current.to_json_dict()
        assert after["colors"]["primary"] == "#ff0000"
        for key, value in before["colors"].items():
            if key != "primary":
                assert after["colors"][key] == value
        before.pop("colors")
        after.pop("colors")
        assert after == before

    def test_feature_toggle(self, two_brands: BrandStore):
        """Should toggle a feature flag."""
        two_brands.update_field("features.biometric", True)
        assert two_brands.current.features.biometric is True

    def test_id_never_changes(self, two_brands: BrandStore):
        """Should never change the selected brand's id."""
        brand_id = two_brands.current.id
        with pytest.raises(InvalidFieldPathError):
            two_brands.update_field("id", "hijack")
        two_brands.update_field("appName", "Other")
        assert two_brands.current.id == brand_id

    def test_invalid_value_leaves_state(self, two_brands: BrandStore):
        """Should raise before touching state on a bad value."""
        before = two_brands.brands
        with pytest.raises(ValidationError):
            two_brands.update_field("versionCode", -1)
        assert two_brands.brands == before

    def test_apply_typed_update(self, two_brands: BrandStore):
        """Should apply a typed update to the selection."""
        two_brands.apply(ColorUpdate(key="surface", value="#eeeeee"))
        assert two_brands.brands[1].colors.surface == "#eeeeee"

    def test_from_text(self, two_brands: BrandStore):
        """Should accept text input when asked to."""
        two_brands.update_field("versionCode", "42", from_text=True)
        assert two_brands.current.version_code == 42


# =============================================================================
# delete_brand / select_brand
# =============================================================================
class TestDeleteAndSelect:
    """Tests for delete_brand and select_brand."""

    def test_delete_only_brand_clears_selection(self, store: BrandStore):
        """Should leave an empty store with nothing selected."""
        brand = store.add_brand()
        store.delete_brand(brand.id)
        assert len(store) == 0
        assert store.current is None

    def test_delete_selected_falls_back_to_first(self, store: BrandStore):
        """Should select the first remaining brand."""
        a = store.add_brand()
        store.add_brand()
        c = store.add_brand()
        store.delete_brand(c.id)
        assert store.current == a

    def test_delete_unselected_keeps_selection(self, two_brands: BrandStore):
        """Should keep the selection when another brand is deleted."""
        first, second = two_brands.brands
        two_brands.delete_brand(first.id)
        assert two_brands.current == second

    def test_delete_unknown_is_noop(self, two_brands: BrandStore):
        """Should ignore unknown ids."""
        two_brands.delete_brand("missing")
        assert len(two_brands) == 2

    def test_select(self, two_brands: BrandStore):
        """Should select an existing brand."""
        first = two_brands.brands[0]
        assert two_brands.select_brand(first.id) == first
        assert two_brands.current == first

    def test_select_miss_keeps_previous(self, two_brands: BrandStore):
        """Should keep the previous selection on an unknown id."""
        previous = two_brands.current
        assert two_brands.select_brand("missing") is None
        assert two_brands.current == previous

    def test_selection_tracks_updates(self, two_brands: BrandStore):
        """Should keep the selection pointing at the updated record."""
        first = two_brands.brands[0]
        two_brands.select_brand(first.id)
        two_brands.update_field("displayName", "Edited")
        assert two_brands.get(first.id).display_name == "Edited"
        assert two_brands.current is two_brands.get(first.id)

    def test_stale_selection_dropped_on_construct(self):
        """Should drop a selection that names no brand."""
        assert BrandStore([], "ghost").current is None


# =============================================================================
# set_asset_from_file
# =============================================================================
class TestAssets:
    """Tests for BrandStore.set_asset_from_file."""

    def test_embeds_png(self, two_brands: BrandStore, tmp_path: Path):
        """Should store a PNG as a data URL under the given key."""
        png = tmp_path / "logo.png"
        Image.new("RGB", (4, 4), "red").save(png)
        two_brands.set_asset_from_file("logo", png)
        assert two_brands.current.assets.logo.startswith("data:image/png;base64,")
        assert two_brands.current.assets.icon is None

    def test_rejects_bad_file(self, two_brands: BrandStore, tmp_path: Path):
        """Should raise AssetError and keep the asset unset."""
        bad = tmp_path / "icon.png"
        bad.write_bytes(b"not an image")
        with pytest.raises(AssetError):
            two_brands.set_asset_from_file("icon", bad)
        assert two_brands.current.assets.icon is None

    def test_no_selection(self, store: BrandStore, tmp_path: Path):
        """Should do nothing when no brand is selected."""
        assert store.set_asset_from_file("icon", tmp_path / "missing.png") is None
