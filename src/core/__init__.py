"""
core - Shared building blocks for the algorithm benchmark engine

    constants  - Dataset seed, algorithm names and priorities, thresholds
    errors     - InvalidArgumentError and friends
    config     - YAML configuration loading into typed settings
    catalog    - Product records, comparators, synthetic dataset generation
"""
