from movie_catalog.cache import CACHE_TTL, CacheStore
from movie_catalog.models import EMPTY_SNAPSHOT, Movie, Name, Principal


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_empty_store_is_invalid():
    store = CacheStore(clock=FakeClock())
    assert not store.is_valid()
    assert store.is_empty
    assert store.current() is EMPTY_SNAPSHOT


def test_valid_until_ttl_expires():
    clock = FakeClock()
    store = CacheStore(clock=clock)
    store.replace([Movie("tt1", "Heat")], [], [])
    assert store.is_valid()
    clock.now += CACHE_TTL - 1
    assert store.is_valid()
    clock.now += 1
    assert not store.is_valid()


def test_default_ttl_is_five_minutes():
    assert CACHE_TTL == 300
    assert CacheStore().ttl == 300


def test_replace_uses_explicit_timestamp():
    clock = FakeClock(now=500.0)
    store = CacheStore(ttl=10, clock=clock)
    snapshot = store.replace([], [], [], now=495.0)
    assert snapshot.fetched_at == 495.0
    clock.now = 505.0
    assert not store.is_valid()


def test_replace_installs_a_complete_snapshot():
    store = CacheStore(clock=FakeClock())
    first = store.replace([Movie("tt1", "Heat")], [Principal(1, "actor", "tt1", "nm1")], [Name("nm1", "Al")])
    second = store.replace([Movie("tt2", "Up")], [], [])
    assert store.current() is second
    assert second.version > first.version
    assert first.movies[0].tconst == "tt1"
    assert second.principals == ()
    assert second.names == ()


def test_snapshot_collections_are_immutable():
    store = CacheStore(clock=FakeClock())
    movies = [Movie("tt1", "Heat")]
    snapshot = store.replace(movies, [], [])
    movies.append(Movie("tt2", "Up"))
    assert isinstance(snapshot.movies, tuple)
    assert len(store.current().movies) == 1


def test_versions_are_unique_across_stores():
    first = CacheStore().replace([], [], [])
    second = CacheStore().replace([], [], [])
    assert first.version != second.version
