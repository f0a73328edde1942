# ABOUTME: Canned Google Books API response fixtures for testing.
# ABOUTME: Provides realistic JSON dicts matching volumes endpoint response shapes.

VOLUME_TIME_WAR = {
    "kind": "books#volume",
    "id": "Zz2ODwAAQBAJ",
    "volumeInfo": {
        "title": "This Is How You Lose the Time War",
        "authors": ["Amal El-Mohtar", "Max Gladstone"],
        "publisher": "Simon and Schuster",
        "publishedDate": "2019-07-16",
        "description": "Two time-traveling agents from warring futures fall in love.",
        "industryIdentifiers": [
            {"type": "ISBN_10", "identifier": "1534431004"},
            {"type": "ISBN_13", "identifier": "9781534431003"},
        ],
        "pageCount": 208,
        "categories": ["Fiction"],
        "imageLinks": {
            "smallThumbnail": "http://books.google.com/books/content?id=Zz2ODwAAQBAJ&zoom=5",
            "thumbnail": "http://books.google.com/books/content?id=Zz2ODwAAQBAJ&zoom=1",
        },
        "language": "en",
    },
}

ISBN_RESPONSE = {
    "kind": "books#volumes",
    "totalItems": 1,
    "items": [VOLUME_TIME_WAR],
}

ISBN_RESPONSE_EMPTY = {
    "kind": "books#volumes",
    "totalItems": 0,
}

SEARCH_RESPONSE = {
    "kind": "books#volumes",
    "totalItems": 4,
    "items": [
        VOLUME_TIME_WAR,
        {
            "id": "noIsbnHere",
            "volumeInfo": {
                "title": "Time War fan magazine",
                "industryIdentifiers": [{"type": "OTHER", "identifier": "UOM:39015"}],
            },
        },
        {
            "id": "isbn10only",
            "volumeInfo": {
                "title": "The Name of the Rose",
                "industryIdentifiers": [{"type": "ISBN_10", "identifier": "0156001314"}],
            },
        },
        {
            "id": "dune",
            "volumeInfo": {
                "title": "Dune",
                "industryIdentifiers": [{"type": "ISBN_13", "identifier": "9780441172719"}],
            },
        },
        {
            "id": "kings",
            "volumeInfo": {
                "title": "The Way of Kings",
                "industryIdentifiers": [{"type": "ISBN_13", "identifier": "9780765326355"}],
            },
        },
    ],
}
