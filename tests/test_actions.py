# =============================================================================
# tests/test_actions.py - Action Handler Tests
# =============================================================================
# This module contains tests for:
# - Catalog reads (featured, search, details)
# - Admin product create / update / image replacement / delete
# - Favorite toggling and listing
# - Gates: anonymous and non-admin callers cause no side effects
#
# Tests run against the in-memory Supabase fake.
# =============================================================================

import copy
from unittest.mock import patch

import pytest

from core import actions
from core.models import ActionError, ActionSuccess, Product, Redirect
from core.services.product_service import _ilike_pattern
from lib.supabase_client import SupabaseClientError
from lib.utils import last_path_segment

from tests.fakes import FakeAPIError

BUCKET = "main-bucket"


def stored_objects(fake):
    return fake.storage.buckets.get(BUCKET, {})


# =============================================================================
# Catalog
# =============================================================================

class TestCatalog:
    """Test the public read handlers."""

    def test_featured_products(self, fake_supabase):
        featured = fake_supabase.add_product(name="Featured Lamp", featured=True)
        fake_supabase.add_product(name="Plain Lamp", featured=False)

        products = actions.fetch_featured_products()

        assert [p.id for p in products] == [featured["id"]]

    def test_search_matches_name_or_company_newest_first(self, fake_supabase):
        oldest = fake_supabase.add_product(name="ACME Rocket", company="Road Supplies")
        fake_supabase.add_product(name="Coyote Trap", company="Desert Goods")
        middle = fake_supabase.add_product(name="Anvil", company="Acme Corp")
        newest = fake_supabase.add_product(name="Giant Magnet", company="acme industries")

        products = actions.fetch_all_products(search="acme")

        assert [p.id for p in products] == [newest["id"], middle["id"], oldest["id"]]

    def test_empty_search_lists_everything_newest_first(self, fake_supabase):
        first = fake_supabase.add_product()
        second = fake_supabase.add_product()

        products = actions.fetch_all_products()

        assert [p.id for p in products] == [second["id"], first["id"]]

    def test_search_with_reserved_characters(self, fake_supabase):
        match = fake_supabase.add_product(name="Chair, Walnut (Large)")
        fake_supabase.add_product(name="Table")

        products = actions.fetch_all_products(search="walnut (large")

        assert [p.id for p in products] == [match["id"]]

    @pytest.mark.parametrize("search,expected", [
        ("a_b", "Model a_b Chair"),
        ("_", "Model a_b Chair"),
        ("%", "50% Off Lamp"),
        ("r*l", "Star*Lamp"),
    ])
    def test_search_wildcard_characters_match_literally(self, fake_supabase, search, expected):
        for name in ["Model a_b Chair", "Model axb Chair", "50% Off Lamp", "Star*Lamp", "Carol Lamp"]:
            fake_supabase.add_product(name=name)

        products = actions.fetch_all_products(search=search)

        assert [p.name for p in products] == [expected]

    @pytest.mark.parametrize("search,pattern", [
        ("chair", "%chair%"),
        ("a_b", '"%a\\\\_b%"'),
        ("50%", '"%50\\\\%%"'),
        ("r*l", "%r_l%"),
    ])
    def test_search_pattern_escapes_like_wildcards(self, search, pattern):
        assert _ilike_pattern(search) == pattern

    def test_single_product(self, fake_supabase):
        row = fake_supabase.add_product()

        product = actions.fetch_single_product(row["id"])

        assert isinstance(product, Product)
        assert product.name == row["name"]

    def test_single_product_missing_redirects_to_listing(self, fake_supabase):
        assert actions.fetch_single_product("missing") == Redirect(location="/products")

    def test_single_product_malformed_id_redirects_to_listing(self, fake_supabase):
        """Postgres rejects a non-uuid id outright; that still means "not found"."""
        fake_supabase.fail_next = FakeAPIError("22P02", 'invalid input syntax for type uuid: "abc"')

        assert actions.fetch_single_product("abc") == Redirect(location="/products")


# =============================================================================
# Create
# =============================================================================

class TestCreateProduct:
    """Test create_product_action."""

    def test_create_uploads_image_and_inserts(self, fake_supabase, shopper, product_form, make_image):
        product_form["image"] = make_image()

        result = actions.create_product_action(shopper, product_form)

        assert result == Redirect(location="/admin/products")
        [row] = fake_supabase.tables["products"]
        assert row["name"] == "Walnut Chair"
        assert row["price"] == 120
        assert row["featured"] is True
        assert row["owner_id"] == "shopper-id"
        assert last_path_segment(row["image"]) in stored_objects(fake_supabase)

    def test_nine_word_description_rejected(self, fake_supabase, shopper, product_form, make_image):
        product_form["description"] = "one two three four five six seven eight nine"
        product_form["image"] = make_image()

        result = actions.create_product_action(shopper, product_form)

        assert isinstance(result, ActionError)
        assert "description must be between 10 and 1000 words" in result.message
        assert fake_supabase.tables["products"] == []
        assert stored_objects(fake_supabase) == {}

    def test_invalid_image_rejected(self, fake_supabase, shopper, product_form, make_image):
        product_form["image"] = make_image(content_type="text/plain")

        result = actions.create_product_action(shopper, product_form)

        assert result == ActionError(message="File must be an image")
        assert fake_supabase.tables["products"] == []

    def test_missing_image_rejected(self, fake_supabase, shopper, product_form):
        result = actions.create_product_action(shopper, product_form)

        assert result == ActionError(message="image file is required")

    def test_anonymous_redirected_without_side_effects(self, fake_supabase, product_form, make_image):
        product_form["image"] = make_image()

        result = actions.create_product_action(None, product_form)

        assert result == Redirect(location="/")
        assert fake_supabase.tables["products"] == []
        assert stored_objects(fake_supabase) == {}

    def test_insert_failure_removes_uploaded_image(self, fake_supabase, shopper, product_form, make_image):
        product_form["image"] = make_image()

        with patch(
            "core.services.product_service.SupabaseClient.insert_row",
            side_effect=RuntimeError("insert failed"),
        ):
            result = actions.create_product_action(shopper, product_form)

        assert result == ActionError(message="insert failed")
        assert stored_objects(fake_supabase) == {}


# =============================================================================
# Admin Reads
# =============================================================================

class TestAdminReads:
    """Test admin-only read handlers."""

    def test_admin_listing_newest_first(self, fake_supabase, admin_user):
        first = fake_supabase.add_product()
        second = fake_supabase.add_product()

        products = actions.fetch_admin_products(admin_user)

        assert [p.id for p in products] == [second["id"], first["id"]]

    def test_admin_listing_denied_to_shopper(self, fake_supabase, shopper):
        assert actions.fetch_admin_products(shopper) == Redirect(location="/")

    def test_admin_details(self, fake_supabase, admin_user):
        row = fake_supabase.add_product()
        assert actions.fetch_admin_product_details(admin_user, row["id"]).id == row["id"]

    def test_admin_details_missing(self, fake_supabase, admin_user):
        result = actions.fetch_admin_product_details(admin_user, "missing")
        assert result == Redirect(location="/admin/products")

    def test_admin_details_malformed_id(self, fake_supabase, admin_user):
        fake_supabase.fail_next = FakeAPIError("22P02", 'invalid input syntax for type uuid: "abc"')

        result = actions.fetch_admin_product_details(admin_user, "abc")

        assert result == Redirect(location="/admin/products")

    def test_admin_details_other_store_errors_propagate(self, fake_supabase, admin_user):
        fake_supabase.fail_next = FakeAPIError("57014", "canceling statement due to statement timeout")

        with pytest.raises(SupabaseClientError):
            actions.fetch_admin_product_details(admin_user, "abc")

    def test_admin_details_denied_before_lookup(self, fake_supabase):
        row = fake_supabase.add_product()
        assert actions.fetch_admin_product_details(None, row["id"]) == Redirect(location="/")


# =============================================================================
# Update
# =============================================================================

class TestUpdateProduct:
    """Test update_product_action."""

    def test_update_fields(self, fake_supabase, admin_user, product_form):
        row = fake_supabase.add_product()
        product_form.update(id=row["id"], name="Walnut Stool", price="80", featured="")

        result = actions.update_product_action(admin_user, product_form)

        assert result == ActionSuccess(
            message="Product updated successfully",
            revalidate=[f"/admin/products/{row['id']}/edit"],
        )
        stored = fake_supabase.tables["products"][0]
        assert stored["name"] == "Walnut Stool"
        assert stored["price"] == 80
        assert stored["featured"] is False
        assert stored["image"] == row["image"]

    def test_update_invalid_fields(self, fake_supabase, admin_user, product_form):
        row = fake_supabase.add_product()
        product_form.update(id=row["id"], name="abc")

        result = actions.update_product_action(admin_user, product_form)

        assert result == ActionError(message="name must be at least 4 characters")
        assert fake_supabase.tables["products"][0]["name"] == row["name"]

    def test_update_missing_product(self, fake_supabase, admin_user, product_form):
        product_form["id"] = "missing"

        result = actions.update_product_action(admin_user, product_form)

        assert result == ActionError(message="Product not found: missing")

    def test_update_denied_to_shopper(self, fake_supabase, shopper, product_form):
        row = fake_supabase.add_product()
        product_form.update(id=row["id"], name="Hijacked Name")

        assert actions.update_product_action(shopper, product_form) == Redirect(location="/")
        assert fake_supabase.tables["products"][0]["name"] == row["name"]


# =============================================================================
# Update Image
# =============================================================================

class TestUpdateProductImage:
    """Test update_product_image_action."""

    @pytest.fixture
    def product_with_image(self, fake_supabase, make_image):
        from core.services.storage_service import StorageService

        url = StorageService.upload_image(make_image(filename="old.png"))
        return fake_supabase.add_product(image=url)

    def test_replaces_image(self, fake_supabase, admin_user, make_image, product_with_image):
        old_url = product_with_image["image"]

        result = actions.update_product_image_action(admin_user, {
            "id": product_with_image["id"],
            "url": old_url,
            "image": make_image(filename="new.png"),
        })

        assert result == ActionSuccess(
            message="Product image updated successfully",
            revalidate=[f"/admin/products/{product_with_image['id']}/edit"],
        )
        new_url = fake_supabase.tables["products"][0]["image"]
        assert new_url != old_url
        assert new_url.endswith("-new.png")
        assert list(stored_objects(fake_supabase)) == [last_path_segment(new_url)]

    def test_old_image_removal_failure_still_succeeds(self, fake_supabase, admin_user, make_image, product_with_image):
        """Once the row points at the new image, the change is reported as done."""
        result = actions.update_product_image_action(admin_user, {
            "id": product_with_image["id"],
            "url": "https://test-project.supabase.co/",
            "image": make_image(filename="new.png"),
        })

        assert isinstance(result, ActionSuccess)
        assert fake_supabase.tables["products"][0]["image"].endswith("-new.png")

    def test_invalid_image_keeps_old(self, fake_supabase, admin_user, make_image, product_with_image):
        old_url = product_with_image["image"]

        result = actions.update_product_image_action(admin_user, {
            "id": product_with_image["id"],
            "url": old_url,
            "image": make_image(size=2 * 1024 * 1024),
        })

        assert result == ActionError(message="File size must be less than 1MB")
        assert fake_supabase.tables["products"][0]["image"] == old_url
        assert last_path_segment(old_url) in stored_objects(fake_supabase)

    def test_missing_product_discards_new_image(self, fake_supabase, admin_user, make_image, product_with_image):
        result = actions.update_product_image_action(admin_user, {
            "id": "missing",
            "url": product_with_image["image"],
            "image": make_image(filename="new.png"),
        })

        assert result == ActionError(message="Product not found: missing")
        assert list(stored_objects(fake_supabase)) == [last_path_segment(product_with_image["image"])]

    def test_denied_to_anonymous(self, fake_supabase, make_image, product_with_image):
        result = actions.update_product_image_action(None, {
            "id": product_with_image["id"],
            "url": product_with_image["image"],
            "image": make_image(filename="new.png"),
        })

        assert result == Redirect(location="/")
        assert len(stored_objects(fake_supabase)) == 1


# =============================================================================
# Delete
# =============================================================================

class TestDeleteProduct:
    """Test delete_product."""

    def test_delete_removes_row_and_image(self, fake_supabase, admin_user, make_image):
        from core.services.storage_service import StorageService

        url = StorageService.upload_image(make_image())
        row = fake_supabase.add_product(image=url)

        result = actions.delete_product(admin_user, row["id"])

        assert result == ActionSuccess(message="product removed", revalidate=["/admin/products"])
        assert fake_supabase.tables["products"] == []
        assert stored_objects(fake_supabase) == {}

    def test_delete_succeeds_when_image_already_gone(self, fake_supabase, admin_user):
        row = fake_supabase.add_product()

        result = actions.delete_product(admin_user, row["id"])

        assert isinstance(result, ActionSuccess)

    def test_delete_nonexistent_surfaces_message(self, fake_supabase, admin_user):
        result = actions.delete_product(admin_user, "missing")

        assert result == ActionError(message="Product not found: missing")

    def test_delete_store_failure_surfaces_message(self, fake_supabase, admin_user):
        fake_supabase.fail_next = FakeAPIError("22P02", "invalid input syntax for type uuid")

        result = actions.delete_product(admin_user, "not-a-uuid")

        assert result == ActionError(message="invalid input syntax for type uuid")

    def test_delete_cascades_favorites(self, fake_supabase, admin_user, shopper):
        row = fake_supabase.add_product()
        actions.toggle_favorite_action(shopper, row["id"], None, "/products")

        actions.delete_product(admin_user, row["id"])

        assert fake_supabase.tables["favorites"] == []

    def test_delete_denied_to_shopper(self, fake_supabase, shopper):
        row = fake_supabase.add_product()

        assert actions.delete_product(shopper, row["id"]) == Redirect(location="/")
        assert len(fake_supabase.tables["products"]) == 1


# =============================================================================
# Favorites
# =============================================================================

class TestFavorites:
    """Test favorite handlers."""

    def test_toggle_adds_then_removes(self, fake_supabase, shopper):
        fake_supabase.add_product(id="p1")

        added = actions.toggle_favorite_action(shopper, "p1", None, "/products/p1")

        assert added == ActionSuccess(message="added to favorites", revalidate=["/products/p1"])
        assert len(fake_supabase.tables["favorites"]) == 1

        favorite_id = actions.fetch_favorite_id(shopper, "p1")
        removed = actions.toggle_favorite_action(shopper, "p1", favorite_id, "/products/p1")

        assert removed.message == "removed from favorites"
        assert fake_supabase.tables["favorites"] == []
        assert actions.fetch_favorite_id(shopper, "p1") is None

    def test_adding_twice_keeps_one_favorite(self, fake_supabase, shopper):
        fake_supabase.add_product(id="p1")

        actions.toggle_favorite_action(shopper, "p1", None, "/products")
        actions.toggle_favorite_action(shopper, "p1", None, "/products")

        assert len(fake_supabase.tables["favorites"]) == 1

    def test_cannot_remove_someone_elses_favorite(self, fake_supabase, shopper, admin_user):
        fake_supabase.add_product(id="p1")
        actions.toggle_favorite_action(admin_user, "p1", None, "/products")
        admin_favorite = actions.fetch_favorite_id(admin_user, "p1")

        result = actions.toggle_favorite_action(shopper, "p1", admin_favorite, "/products")

        assert result == ActionError(message=f"Favorite not found: {admin_favorite}")
        assert len(fake_supabase.tables["favorites"]) == 1

    def test_toggle_denied_to_anonymous(self, fake_supabase):
        fake_supabase.add_product(id="p1")

        assert actions.toggle_favorite_action(None, "p1", None, "/products") == Redirect(location="/")
        assert fake_supabase.tables["favorites"] == []

    def test_user_favorites_joined_with_products(self, fake_supabase, shopper, admin_user):
        lamp = fake_supabase.add_product(id="lamp", name="Brass Lamp")
        chair = fake_supabase.add_product(id="chair", name="Walnut Chair")
        actions.toggle_favorite_action(shopper, "lamp", None, "/products")
        actions.toggle_favorite_action(shopper, "chair", None, "/products")
        actions.toggle_favorite_action(admin_user, "lamp", None, "/products")

        favorites = actions.fetch_user_favorites(shopper)

        assert [f.product.name for f in favorites] == [chair["name"], lamp["name"]]
        assert all(f.owner_id == "shopper-id" for f in favorites)

    def test_favorite_reads_require_sign_in(self, fake_supabase):
        assert actions.fetch_user_favorites(None) == Redirect(location="/")
        assert actions.fetch_favorite_id(None, "p1") == Redirect(location="/")

    def test_favorite_lookup_with_malformed_product_id(self, fake_supabase, shopper):
        fake_supabase.fail_next = FakeAPIError("22P02", 'invalid input syntax for type uuid: "abc"')

        assert actions.fetch_favorite_id(shopper, "abc") is None


# =============================================================================
# Gates
# =============================================================================

# Each gated handler, called with (user, product_id, form, image)
GATED_HANDLERS = {
    "create_product_action": lambda user, pid, form, image: actions.create_product_action(
        user, {**form, "image": image}
    ),
    "fetch_admin_products": lambda user, pid, form, image: actions.fetch_admin_products(user),
    "delete_product": lambda user, pid, form, image: actions.delete_product(user, pid),
    "fetch_admin_product_details": lambda user, pid, form, image: actions.fetch_admin_product_details(
        user, pid
    ),
    "update_product_action": lambda user, pid, form, image: actions.update_product_action(
        user, {**form, "id": pid, "name": "Changed Name"}
    ),
    "update_product_image_action": lambda user, pid, form, image: actions.update_product_image_action(
        user, {"id": pid, "url": "", "image": image}
    ),
    "toggle_favorite_action": lambda user, pid, form, image: actions.toggle_favorite_action(
        user, pid, None, "/products"
    ),
    "fetch_favorite_id": lambda user, pid, form, image: actions.fetch_favorite_id(user, pid),
    "fetch_user_favorites": lambda user, pid, form, image: actions.fetch_user_favorites(user),
}

ADMIN_HANDLERS = [
    "fetch_admin_products",
    "delete_product",
    "fetch_admin_product_details",
    "update_product_action",
    "update_product_image_action",
]


class TestGates:
    """Every gated handler redirects home and leaves the stores untouched."""

    def call_denied(self, fake_supabase, handler, user, product_form, make_image):
        row = fake_supabase.add_product()
        before = copy.deepcopy(fake_supabase.tables)

        result = GATED_HANDLERS[handler](user, row["id"], product_form, make_image())

        assert result == Redirect(location="/")
        assert fake_supabase.tables == before
        assert stored_objects(fake_supabase) == {}

    @pytest.mark.parametrize("handler", sorted(GATED_HANDLERS))
    def test_anonymous_denied(self, fake_supabase, product_form, make_image, handler):
        self.call_denied(fake_supabase, handler, None, product_form, make_image)

    @pytest.mark.parametrize("handler", ADMIN_HANDLERS)
    def test_shopper_denied_admin_handlers(self, fake_supabase, shopper, product_form, make_image, handler):
        self.call_denied(fake_supabase, handler, shopper, product_form, make_image)


# =============================================================================
# Error Rendering
# =============================================================================

class TestRenderError:
    """Test reduction of exceptions to messages."""

    def test_uses_message_attribute(self):
        assert actions.render_error(FakeAPIError("X", "boom")).message == "boom"

    def test_falls_back_to_str(self):
        assert actions.render_error(RuntimeError("plain")).message == "plain"

    def test_empty_error(self):
        assert actions.render_error(RuntimeError()).message == "an error occurred"
