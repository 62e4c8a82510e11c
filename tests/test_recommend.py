from movie_catalog.models import Movie
from movie_catalog.recommend import genre_overlap, similar_to

ALPHA = Movie("1", "Alpha", year="1994", runtime="100", genre="Drama")
BETA = Movie("2", "Beta", year="1994", runtime="90", genre="Drama,Crime")

MOVIES = [
    Movie("10", "Heat", year="1995", genre="Action,Crime,Drama"),
    Movie("11", "Ronin", year="1998", genre="Action,Crime,Thriller"),
    Movie("12", "Casino", year="1995", genre="Crime,Drama"),
    Movie("13", "Up", year="2009", genre="Animation,Adventure,Comedy"),
    Movie("14", "Collateral", year="2004", genre="Crime,Drama,Thriller"),
    Movie("15", "Untitled", year="", genre="Crime,Drama"),
    Movie("16", "No Genre", year="2001", genre=""),
    Movie("17", "Thief", year="1981", genre="Action,Crime,Drama"),
]


def test_similar_scenario():
    result = similar_to([ALPHA, BETA], ALPHA, 6)
    assert result == [BETA]
    assert genre_overlap(["Drama"], BETA) == 1


def test_similar_excludes_target():
    target = MOVIES[0]
    result = similar_to(MOVIES, target, limit=10)
    assert target not in result


def test_similar_ranks_by_score_then_year():
    target = MOVIES[0]
    result = similar_to(MOVIES, target, limit=10)
    assert [movie.tconst for movie in result] == ["17", "14", "11", "12", "15"]


def test_similar_output_is_sorted():
    target = MOVIES[0]
    genres = ["Action", "Crime", "Drama"]
    result = similar_to(MOVIES, target, limit=10)
    keys = [(genre_overlap(genres, movie), int(movie.year or 0)) for movie in result]
    assert keys == sorted(keys, reverse=True)


def test_similar_respects_limit():
    result = similar_to(MOVIES, MOVIES[0], limit=2)
    assert [movie.tconst for movie in result] == ["17", "14"]


def test_similar_default_limit():
    movies = [Movie(str(i), f"movie {i}", year=str(1950 + i), genre="Drama") for i in range(10)]
    result = similar_to(movies, movies[0])
    assert len(result) == 6
    assert result[0].tconst == "9"


def test_similar_without_genre_is_empty():
    assert similar_to(MOVIES, MOVIES[6]) == []


def test_similar_skips_candidates_without_genre():
    result = similar_to(MOVIES, MOVIES[2], limit=10)
    assert MOVIES[6] not in result
    assert MOVIES[3] not in result


def test_similar_substring_containment():
    war = Movie("1", "War", year="2000", genre="War")
    warfare = Movie("2", "Warfare", year="2001", genre="Warfare")
    assert similar_to([war, warfare], war) == [warfare]


def test_similar_no_candidates():
    assert similar_to([ALPHA], ALPHA) == []
