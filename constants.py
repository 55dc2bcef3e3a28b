"""
Global constants used throughout the project
"""

# Graph store
DEFAULT_WEIGHT = 1

# Sentinel distance returned when no path exists
NO_PATH_DISTANCE = -1

# Logging
LOG_FORMAT = "%(levelname)s | %(message)s"

# Rendering
PATH_SEPARATOR = " -> "
EMPTY_ROUTE = "(no route)"


# Demo network used by main.py and the route explorer.
# Points: name -> (x, y) in km
DEMO_POINTS = {
    "Airport": (0.0, 0.0),
    "Harbor": (12.0, -3.0),
    "Center": (6.0, 4.0),
    "Station": (10.0, 9.0),
    "University": (3.0, 11.0),
    "Stadium": (15.0, 14.0),
    "Island": (22.0, -6.0),
}

# Routes: (start, destination, distance in km)
DEMO_ROUTES = [
    ("Airport", "Center", 7.2),
    ("Airport", "Harbor", 12.4),
    ("Center", "Harbor", 9.0),
    ("Center", "Station", 6.4),
    ("Center", "University", 7.6),
    ("Station", "University", 7.3),
    ("Station", "Stadium", 7.1),
    ("Harbor", "Station", 12.2),
    ("Harbor", "Island", 10.4),
]

# Obstacles: (description, x, y)
DEMO_OBSTACLES = [
    ("Traffic jam", 8.0, 6.5),
    ("Storm", 18.0, -4.5),
    ("Road works", 4.5, 8.0),
]
