"""
Determinism-friendly simulation helpers.

Small primitives (seeded RNG, sim time, data contracts) plus the headless batch
runner, so round code never touches wall-clock time or the global `random` module.
"""
