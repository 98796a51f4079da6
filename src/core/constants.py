"""
===============================================================================
ALGORITHM BENCHMARKS - Shared Constants
===============================================================================
Central repository for the fixed values used across the benchmark engine:
dataset generation parameters, algorithm names and their tie-break priority,
advisory thresholds, and report formatting constants.

DATASET_SEED is part of the recorded results: every benchmark number and test
fixture that depends on a generated dataset assumes this exact value.
===============================================================================
"""

# =============================================================================
# DATASET GENERATION
# =============================================================================
DATASET_SEED = 42                      # numpy default_rng seed for synthetic data
PRICE_MIN = 10.0                       # inclusive lower bound of generated prices
PRICE_MAX = 1000.0                     # exclusive upper bound of generated prices
STOCK_MIN = 0                          # inclusive lower bound of generated stock
STOCK_MAX = 1000                       # exclusive upper bound of generated stock

# =============================================================================
# SEARCH
# =============================================================================
NOT_FOUND = -1                         # sentinel returned by every search routine

# =============================================================================
# ALGORITHM NAMES
# =============================================================================
QUICK_SORT = "QuickSort"
MERGE_SORT = "MergeSort"
HEAP_SORT = "HeapSort"

BINARY_SEARCH = "BinarySearch"
JUMP_SEARCH = "JumpSearch"
LINEAR_SEARCH = "LinearSearch"

# Tie-break priority, highest first
SORT_PRIORITY = (QUICK_SORT, MERGE_SORT, HEAP_SORT)
SEARCH_PRIORITY = (BINARY_SEARCH, JUMP_SEARCH, LINEAR_SEARCH)

# =============================================================================
# RECOMMENDATION THRESHOLDS (policy, overridable via configuration)
# =============================================================================
SMALL_DATASET_THRESHOLD = 1000         # below: delegate sorting to the store
LARGE_DATASET_THRESHOLD = 10000        # above: paginate and index
TIE_TOLERANCE = 0.0                    # fraction of the fastest time treated as a tie

API_GAIN_THRESHOLD = 20.0              # percent; above this the API winner is advised
CACHING_LATENCY_THRESHOLD_MS = 100.0   # faster API average above this -> caching
CACHING_DATASET_THRESHOLD = 5000       # dataset size above this -> caching advisories
SYSTEM_METRIC_LIMITS = {
    "CPU Usage": 80.0,
    "Memory Usage": 80.0,
}

# =============================================================================
# REPORTING
# =============================================================================
REPORT_TITLE = "Performance Analysis Report"
REPORT_VERSION = "1.0.0"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
AVERAGE_RESPONSE_TIME = "Average Response Time"
REST_API = "REST"
GRAPHQL_API = "GraphQL"

# Sample latency and system figures used when no configuration supplies them
DEFAULT_REST_METRICS = {
    "Average Response Time": 45.5,
    "P95 Response Time": 89.2,
    "Throughput": 1250.0,
}
DEFAULT_GRAPHQL_METRICS = {
    "Average Response Time": 38.2,
    "P95 Response Time": 76.5,
    "Throughput": 1450.0,
}
DEFAULT_SYSTEM_METRICS = {
    "CPU Usage": 45.2,
    "Memory Usage": 67.8,
    "Connection Pool Size": 20,
}
