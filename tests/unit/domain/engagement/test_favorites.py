"""Tests for the favorites ledger."""

from datetime import UTC, datetime, timedelta

from studio.domain.content.model.content import ContentType, Project, Visibility
from studio.domain.engagement.model.favorite import FavoriteEntry, FavoriteMetadata
from studio.domain.engagement.service.favorites import FavoritesLedger
from studio.domain.shared import storage_keys
from studio.infrastructure.local.memory import InMemoryLocalStore


def _meta(title: str = "Item") -> FavoriteMetadata:
    return FavoriteMetadata(title=title)


class TestToggle:
    def test_toggle_adds_then_removes(self, local_store, notifier) -> None:
        ledger = FavoritesLedger(local_store, notifier)
        assert ledger.toggle("u1", "1", ContentType.GRADIENT, _meta()) is True
        assert ledger.is_favorited("u1", "1", ContentType.GRADIENT)
        assert ledger.toggle("u1", "1", ContentType.GRADIENT, _meta()) is False
        assert not ledger.is_favorited("u1", "1", ContentType.GRADIENT)
        assert [n.message for n in notifier.history] == ["Added to favorites", "Removed from favorites"]

    def test_entries_are_scoped_by_viewer_and_type(self, local_store, notifier) -> None:
        ledger = FavoritesLedger(local_store, notifier)
        ledger.toggle("u1", "1", ContentType.GRADIENT, _meta())
        assert not ledger.is_favorited("u2", "1", ContentType.GRADIENT)
        assert not ledger.is_favorited(None, "1", ContentType.GRADIENT)
        assert not ledger.is_favorited("u1", "1", ContentType.PROJECT)

    def test_guest_favorites(self, local_store, notifier) -> None:
        ledger = FavoritesLedger(local_store, notifier)
        ledger.toggle(None, "public-1", ContentType.PROJECT, _meta())
        assert ledger.count(None) == 1

    def test_persisted_across_instances(self, local_store, notifier) -> None:
        FavoritesLedger(local_store, notifier).toggle("u1", "2", ContentType.BLOG_POST, _meta("Post"))
        reopened = FavoritesLedger(local_store, notifier)
        assert reopened.list_favorites("u1")[0].metadata.title == "Post"

    def test_quota_failure_is_notified(self, notifier) -> None:
        ledger = FavoritesLedger(InMemoryLocalStore(quota_bytes=20), notifier)
        assert ledger.toggle("u1", "1", ContentType.GRADIENT, _meta()) is True
        assert notifier.history[-1].message == "Failed to update favorites"


class TestQueries:
    def test_list_newest_first_and_by_type(self, local_store, notifier) -> None:
        now = datetime.now(UTC)
        local_store.set(
            storage_keys.FAVORITES,
            [
                FavoriteEntry(
                    viewer_id="u1",
                    content_id=str(i),
                    content_type=ContentType.GRADIENT if i % 2 else ContentType.PROJECT,
                    metadata=_meta(str(i)),
                    created_at=now + timedelta(minutes=i),
                ).model_dump(mode="json")
                for i in range(4)
            ],
        )
        ledger = FavoritesLedger(local_store, notifier)

        assert [e.content_id for e in ledger.list_favorites("u1")] == ["3", "2", "1", "0"]
        assert [e.content_id for e in ledger.list_favorites("u1", ContentType.GRADIENT)] == ["3", "1"]
        assert ledger.count("u1", ContentType.PROJECT) == 2

    def test_remove_and_clear_all(self, local_store, notifier) -> None:
        ledger = FavoritesLedger(local_store, notifier)
        ledger.toggle("u1", "1", ContentType.GRADIENT, _meta())
        ledger.toggle("u1", "2", ContentType.GRADIENT, _meta())
        ledger.toggle("u2", "1", ContentType.GRADIENT, _meta())

        ledger.remove("u1", "1", ContentType.GRADIENT)
        ledger.remove("u1", "missing", ContentType.GRADIENT)
        assert [e.content_id for e in ledger.entries_for("u1")] == ["2"]

        ledger.clear_all("u1")
        assert ledger.count("u1") == 0
        assert ledger.count("u2") == 1

    def test_metadata_from_item(self) -> None:
        item = Project(id="p", title="T", image="img.png", category="Fintech", visibility=Visibility.PRIVATE)
        meta = FavoriteMetadata.of(item)
        assert meta.title == "T"
        assert meta.image == "img.png"
        assert meta.is_private


class TestLegacyMigration:
    def test_moves_legacy_ids_to_viewer(self, local_store, notifier) -> None:
        local_store.set(storage_keys.LEGACY_GRADIENT_FAVORITES, ["1", "3", "1"])
        ledger = FavoritesLedger(local_store, notifier)

        added = ledger.migrate_legacy("u1", lambda gid: FavoriteMetadata(title=f"Gradient {gid}"))

        assert added == 2
        assert ledger.is_favorited("u1", "1", ContentType.GRADIENT)
        assert ledger.list_favorites("u1", ContentType.GRADIENT)[0].metadata.title.startswith("Gradient")
        assert local_store.get(storage_keys.LEGACY_GRADIENT_FAVORITES) is None

    def test_no_duplicates_with_existing(self, local_store, notifier) -> None:
        ledger = FavoritesLedger(local_store, notifier)
        ledger.toggle("u1", "1", ContentType.GRADIENT, _meta())
        local_store.set(storage_keys.LEGACY_GRADIENT_FAVORITES, ["1", "2"])

        assert ledger.migrate_legacy("u1") == 1
        assert ledger.count("u1", ContentType.GRADIENT) == 2

    def test_rerun_is_noop(self, local_store, notifier) -> None:
        local_store.set(storage_keys.LEGACY_GRADIENT_FAVORITES, ["1"])
        ledger = FavoritesLedger(local_store, notifier)
        assert ledger.migrate_legacy("u1") == 1
        assert ledger.migrate_legacy("u1") == 0
        assert ledger.count("u1") == 1

    def test_missing_metadata_uses_id_as_title(self, local_store, notifier) -> None:
        local_store.set(storage_keys.LEGACY_GRADIENT_FAVORITES, ["9"])
        ledger = FavoritesLedger(local_store, notifier)
        ledger.migrate_legacy("u1", lambda gid: None)
        assert ledger.entries_for("u1")[0].metadata.title == "9"
