"""Empirical wet-day probability."""


def wet_day_probability(wet_days: int, valid_days: int) -> float:
    """Fraction of valid days that were wet. No smoothing or prior.

    Returns 0.0 when there are no valid days.
    """
    if wet_days < 0 or valid_days < 0:
        raise ValueError(f"counts must be non-negative, got {wet_days}/{valid_days}")
    if wet_days > valid_days:
        raise ValueError(f"wet_days {wet_days} exceeds valid_days {valid_days}")
    if valid_days == 0:
        return 0.0
    return wet_days / valid_days
