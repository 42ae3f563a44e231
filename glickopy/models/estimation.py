"""
Estimation functions (steps 3 and 4 of the Glicko-2 algorithm)

Everything a rating period contributes to a competitor's update is summarized by two numbers:
the estimated variance v of the rating based only on game outcomes, and the estimated improvement
delta obtained by comparing the pre-period rating to the performance rating.
"""
import numpy as np


def _as_arrays(*arrays):
    arrays = [np.asarray(array, dtype=np.float64) for array in arrays]
    lengths = {array.shape[0] for array in arrays}
    if len(lengths) != 1:
        raise ValueError(f'Expected arrays of equal length, got lengths {[array.shape[0] for array in arrays]}')
    if lengths.pop() == 0:
        raise ValueError('Cannot estimate from an empty set of opponents')
    return arrays


def estimate_variance(gs, probs) -> float:
    """v = 1 / sum(g^2 * E * (1 - E))"""
    gs, probs = _as_arrays(gs, probs)
    info = (np.square(gs) * probs * (1.0 - probs)).sum()
    if info <= 0.0:
        raise ValueError('Estimated variance is undefined, every opponent carries zero information')
    return float(1.0 / info)


def estimate_improvement_partial(gs, probs, outcomes) -> float:
    """
    sum(g * (s - E)), this is like a gradient

    the delta of the paper is this multiplied by the estimated variance, the rating update
    only needs the un-scaled version
    """
    gs, probs, outcomes = _as_arrays(gs, probs, outcomes)
    return float((gs * (outcomes - probs)).sum())


def estimate_improvement(gs, probs, outcomes, v=None) -> float:
    """delta = v * sum(g * (s - E))"""
    if v is None:
        v = estimate_variance(gs, probs)
    return v * estimate_improvement_partial(gs, probs, outcomes)
