"""Information measures of the published TET formula.

Implements H(X), H_Y(X) and I(X;Y) from Minguri et al., "Text Entry
Throughput: Towards Unifying Speed and Accuracy in a Single Performance
Metric" (CHI 2019). Presented symbols range over the distribution's
alphabet; received symbols range over the alphabet plus a gap (omission).
"""

import numpy as np

from tet.alignment import AlignmentStats
from tet.distribution import Distribution


def entropy(distribution: Distribution) -> float:
    """H(X) in bits per symbol."""
    return distribution.entropy()


def joint_probabilities(distribution: Distribution, stats: AlignmentStats) -> np.ndarray:
    """p(i, j) for presented i and received j.

    Returns:
        Array of shape (K, K + 1); the last column is the omission gap
    """
    p = np.fromiter(distribution.probabilities().values(), dtype=np.float64)
    k = p.size

    p_dash = p * (1.0 - stats.insertion_probability)

    off_diagonal = stats.substitution_probability / (k - 1) if k > 1 else 0.0
    channel = np.full((k, k), off_diagonal, dtype=np.float64)
    np.fill_diagonal(channel, stats.correct_probability)

    joint = np.empty((k, k + 1), dtype=np.float64)
    joint[:, :k] = p_dash[:, None] * channel
    joint[:, k] = p_dash * stats.omission_probability
    return joint


def conditional_entropy(distribution: Distribution, stats: AlignmentStats) -> float:
    """H_Y(X): bits per symbol still uncertain after seeing the transcription."""
    joint = joint_probabilities(distribution, stats)
    received = joint.sum(axis=0)

    # 0 * log(0) terms contribute nothing
    mask = joint > 0.0
    posterior = np.divide(joint, received[None, :], out=np.ones_like(joint), where=mask)
    return float(-np.sum(joint[mask] * np.log2(posterior[mask])))


def mutual_information(distribution: Distribution, stats: AlignmentStats) -> float:
    """I(X;Y) = H(X) - H_Y(X), bits per character."""
    return entropy(distribution) - conditional_entropy(distribution, stats)
