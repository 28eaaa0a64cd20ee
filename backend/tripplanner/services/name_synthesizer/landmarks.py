"""Curated landmark lists for well-known cities.

Keys are matched as case-insensitive substrings of the canonical city name,
in table order. Names here are used verbatim (no city qualifier).
"""

CURATED_LANDMARKS: list[tuple[tuple[str, ...], list[str]]] = [
    (
        ("london",),
        [
            "Buckingham Palace",
            "Big Ben",
            "London Eye",
            "Tower Bridge",
            "British Museum",
            "Westminster Abbey",
            "Hyde Park",
            "Tower of London",
            "St. Paul's Cathedral",
            "Covent Garden",
        ],
    ),
    (
        ("paris",),
        [
            "Eiffel Tower",
            "Louvre Museum",
            "Notre-Dame Cathedral",
            "Arc de Triomphe",
            "Champs-Élysées",
            "Montmartre",
            "Seine River",
            "Musée d'Orsay",
        ],
    ),
    (
        ("singapore",),
        [
            "Marina Bay Sands",
            "Gardens by the Bay",
            "Sentosa Island",
            "Singapore Zoo",
            "Universal Studios Singapore",
            "Merlion Park",
            "Orchard Road",
            "Chinatown",
        ],
    ),
    (
        ("tokyo",),
        [
            "Tokyo Skytree",
            "Senso-ji Temple",
            "Shibuya Crossing",
            "Meiji Shrine",
            "Tsukiji Market",
            "Tokyo Tower",
            "Imperial Palace",
            "Harajuku",
        ],
    ),
    (
        ("new york", "nyc"),
        [
            "Statue of Liberty",
            "Central Park",
            "Times Square",
            "Empire State Building",
            "Brooklyn Bridge",
            "Metropolitan Museum of Art",
            "Broadway",
            "High Line",
        ],
    ),
    (
        ("sydney",),
        [
            "Sydney Opera House",
            "Sydney Harbour Bridge",
            "Bondi Beach",
            "Royal Botanic Gardens",
            "Taronga Zoo",
            "The Rocks",
            "Darling Harbour",
        ],
    ),
]

# Used for cities missing from the table; "{city}" is filled in.
FALLBACK_PATTERNS: list[str] = [
    "{city} City Center",
    "{city} Main Square",
    "{city} Historical District",
    "{city} Central Park",
    "{city} Museum",
    "{city} Cathedral",
    "{city} Market",
    "{city} Observation Point",
]

GENERIC_PATTERNS: list[str] = [
    "{city} Museum",
    "{city} Cathedral",
    "{city} Park",
    "{city} Tower",
    "{city} Palace",
    "{city} Bridge",
    "{city} Market",
    "{city} Square",
    "{city} Gardens",
    "{city} Zoo",
]

# (trigger keywords, patterns) for criteria-driven expansion
CRITERIA_PATTERNS: list[tuple[frozenset[str], list[str]]] = [
    (
        frozenset({"cultural", "culture"}),
        ["{city} Museum", "{city} Art Gallery", "{city} Cathedral", "{city} Historical Center"],
    ),
    (
        frozenset({"nature", "park"}),
        ["{city} Central Park", "{city} Botanical Gardens", "{city} Nature Reserve"],
    ),
    (
        frozenset({"entertainment", "fun"}),
        ["{city} Theme Park", "{city} Entertainment District", "{city} Observation Deck"],
    ),
]
