# ABOUTME: Canned Open Library API response fixtures for testing.
# ABOUTME: Provides realistic JSON dicts matching Books API, edition, works, and search shapes.

BOOKS_API_RESPONSE = {
    "ISBN:9781534431003": {
        "url": "https://openlibrary.org/books/OL27386935M/This_Is_How_You_Lose_the_Time_War",
        "key": "/books/OL27386935M",
        "title": "This Is How You Lose the Time War",
        "authors": [
            {"url": "https://openlibrary.org/authors/OL7455237A", "name": "Amal El-Mohtar"},
            {"url": "https://openlibrary.org/authors/OL6900849A", "name": "Max Gladstone"},
        ],
        "number_of_pages": 209,
        "identifiers": {
            "isbn_13": ["9781534431003"],
            "isbn_10": ["1534431004"],
            "openlibrary": ["OL27386935M"],
        },
        "publishers": [{"name": "Saga Press"}],
        "publish_date": "Jul 16, 2019",
        "subjects": [
            {"name": "Time travel", "url": "https://openlibrary.org/subjects/time_travel"},
            {"name": "Fiction", "url": "https://openlibrary.org/subjects/fiction"},
        ],
        "cover": {
            "small": "https://covers.openlibrary.org/b/id/9255566-S.jpg",
            "medium": "https://covers.openlibrary.org/b/id/9255566-M.jpg",
            "large": "https://covers.openlibrary.org/b/id/9255566-L.jpg",
        },
    }
}

BOOKS_API_RESPONSE_EMPTY: dict = {}

EDITION_RESPONSE = {
    "key": "/books/OL27386935M",
    "title": "This Is How You Lose the Time War",
    "languages": [{"key": "/languages/eng"}],
    "works": [{"key": "/works/OL20093024W"}],
}

WORKS_RESPONSE_STR_DESCRIPTION = {
    "key": "/works/OL20093024W",
    "title": "This Is How You Lose the Time War",
    "description": "Among the ashes of a dying world, an agent of the Commandant finds a letter.",
}

WORKS_RESPONSE_DICT_DESCRIPTION = {
    "key": "/works/OL20093024W",
    "title": "This Is How You Lose the Time War",
    "description": {
        "type": "/type/text",
        "value": "Among the ashes of a dying world, an agent of the Commandant finds a letter.",
    },
}

WORKS_RESPONSE_NO_DESCRIPTION = {
    "key": "/works/OL20093024W",
    "title": "This Is How You Lose the Time War",
}

SEARCH_RESPONSE = {
    "numFound": 3,
    "start": 0,
    "docs": [
        {
            "key": "/works/OL20093024W",
            "title": "This Is How You Lose the Time War",
            "isbn": ["1534431004", "9781534431003", "9781529405231"],
        },
        {
            "key": "/works/OL999W",
            "title": "Time War study notes",
        },
        {
            "key": "/works/OL456W",
            "title": "The Name of the Rose",
            "isbn": ["0156001314"],
        },
    ],
}

SEARCH_RESPONSE_EMPTY = {
    "numFound": 0,
    "start": 0,
    "docs": [],
}
