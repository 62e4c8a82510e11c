from movie_catalog.cache import CacheStore
from movie_catalog.lookup import UNKNOWN_ACTOR, CatalogIndex, distinct_genres
from movie_catalog.models import Movie, Name, Principal

MOVIES = [
    Movie("tt1", "Heat", year="1995", genre="Action, Crime,Drama"),
    Movie("tt2", "Up", year="2009", genre="Animation,Adventure,Comedy"),
    Movie("tt3", "Untitled", year="", genre=""),
]
NAMES = [
    Name("nm1", "Al Pacino", birth_year="1940"),
    Name("nm2", "Robert De Niro", birth_year="1943"),
    Name("nm3", "Michael Mann", birth_year="1943"),
]
PRINCIPALS = [
    Principal(1, "director", "tt1", "nm3"),
    Principal(2, "actor", "tt1", "nm1", characters=("Vincent Hanna",)),
    Principal(3, "actor", "tt1", "nm2", characters=("Neil McCauley",)),
    Principal(4, "stunts", "tt1", "nm404"),
    Principal(5, "composer", "tt9", "nm1"),
]


def _index(movies=MOVIES, principals=PRINCIPALS, names=NAMES):
    store = CacheStore()
    store.replace(movies, principals, names)
    return store, CatalogIndex(store)


def test_genres_are_sorted_trimmed_and_distinct():
    _, index = _index()
    assert index.genres() == ["Action", "Adventure", "Animation", "Comedy", "Crime", "Drama"]


def test_genres_recomputed_on_new_snapshot():
    store, index = _index()
    assert "Western" not in index.genres()
    store.replace([Movie("tt7", "Unforgiven", genre="Western,Drama")], [], [])
    assert index.genres() == ["Drama", "Western"]


def test_genres_empty_store():
    index = CatalogIndex(CacheStore())
    assert index.genres() == []
    assert distinct_genres([]) == []


def test_principals_for_preserves_order():
    _, index = _index()
    assert [p.id for p in index.principals_for("tt1")] == [1, 2, 3, 4]
    assert index.principals_for("tt2") == []


def test_principals_for_returns_copy():
    _, index = _index()
    index.principals_for("tt1").clear()
    assert len(index.principals_for("tt1")) == 4


def test_name_for_unknown_reference():
    _, index = _index()
    assert index.name_for("nm1") == "Al Pacino"
    assert index.name_for("nm404") == UNKNOWN_ACTOR


def test_name_for_duplicate_ids_keeps_first():
    _, index = _index(names=[Name("nm1", "First"), Name("nm1", "Second")])
    assert index.name_for("nm1") == "First"


def test_movie_by_id():
    _, index = _index()
    assert index.movie_by_id("tt2").title == "Up"
    assert index.movie_by_id("tt404") is None


def test_credits_grouped_by_category_order():
    _, index = _index()
    groups = index.credits_for("tt1")
    assert [group.category for group in groups] == ["actor", "director", "stunts"]
    actors = groups[0].credits
    assert [credit.name for credit in actors] == ["Al Pacino", "Robert De Niro"]
    assert actors[0].characters == ("Vincent Hanna",)
    assert groups[2].credits[0].name == UNKNOWN_ACTOR


def test_credits_for_movie_missing_from_snapshot():
    _, index = _index()
    groups = index.credits_for("tt9")
    assert [group.category for group in groups] == ["composer"]
    assert index.movie_by_id("tt9") is None
