"""
Mock TMDB API responses for testing.
"""

TMDB_TRENDING = {
    "page": 1,
    "results": [
        {
            "id": 123456,
            "media_type": "movie",
            "title": "Test Movie",
            "overview": "A trending test movie.",
            "poster_path": "/poster123.jpg",
            "backdrop_path": "/backdrop123.jpg",
            "vote_average": 7.5,
        },
        {
            "id": 78901,
            "media_type": "tv",
            "name": "Test Show",
            "overview": "A trending test show.",
            "poster_path": "/tvposter123.jpg",
            "backdrop_path": "/tvbackdrop123.jpg",
            "vote_average": 8.2,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

TMDB_POPULAR_MOVIES = {
    "page": 1,
    "results": [
        {
            "id": 123456,
            "title": "Test Movie",
            "release_date": "2024-01-15",
            "poster_path": "/poster123.jpg",
            "genre_ids": [28, 12, 878],
        },
        {
            "id": 123457,
            "title": "Test Movie 2",
            "release_date": "2023-06-20",
            "poster_path": None,
        },
    ],
    "total_pages": 500,
    "total_results": 10000,
}

TMDB_MULTI_SEARCH = {
    "page": 1,
    "results": [
        {
            "id": 123456,
            "media_type": "movie",
            "title": "Test Movie",
            "poster_path": "/poster123.jpg",
        },
        {
            "id": 78901,
            "media_type": "tv",
            "name": "Test Show",
            "poster_path": "/tvposter123.jpg",
        },
        {
            "id": 1001,
            "media_type": "person",
            "name": "Test Actor",
            "profile_path": "/actor1.jpg",
        },
    ],
    "total_pages": 1,
    "total_results": 3,
}

TMDB_MOVIE_DETAILS = {
    "id": 123456,
    "title": "Test Movie",
    "original_title": "Test Movie Original",
    "overview": "A test movie for testing metadata lookup.",
    "release_date": "2024-01-15",
    "runtime": 120,
    "vote_average": 7.5,
    "poster_path": "/poster123.jpg",
    "backdrop_path": "/backdrop123.jpg",
    "genres": [
        {"id": 28, "name": "Ação"},
        {"id": 12, "name": "Aventura"},
    ],
}

TMDB_MOVIE_CREDITS = {
    "id": 123456,
    "cast": [
        {"id": 1001, "name": "Test Actor", "character": "Main Character", "order": 0},
        {"id": 1002, "name": "Test Actress", "character": "Supporting Character", "order": 1},
    ],
    "crew": [
        {"id": 2001, "name": "Test Director", "job": "Director", "department": "Directing"},
    ],
}

TMDB_PERSON = {
    "id": 1001,
    "name": "Test Actor",
    "biography": "An actor who only appears in tests.",
    "known_for_department": "Acting",
    "profile_path": "/actor1.jpg",
}
