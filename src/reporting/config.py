# Fixed report sentences
NO_ELIGIBLE_CLIENTS_MESSAGE = "This executor cannot meet the demands of any client!"
ALL_CLIENTS_COVERED_MESSAGE = "This executor meets all demands of all clients!"
PARTIAL_COVERAGE_TEMPLATE = (
    "This executor meets the demands of only {matching} out of {total} clients"
)

# Section headers keyed by sort criterion
HEADER_BY_REWARD = "Available clients sorted by highest reward:"
HEADER_BY_DISTANCE = "Available clients sorted by distance to executor:"

# Row formatting
CLIENT_ROW_TEMPLATE = "name: {name}, distance: {distance}, reward: {reward}"
DISTANCE_DECIMALS = 3

DEFAULT_SORT_BY = "distance"
